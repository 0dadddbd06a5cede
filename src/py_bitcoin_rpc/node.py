# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""Python wrappers around the Bitcoin Core JSON-RPC."""

# Load standard packages
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

# Load local packages
from .params import build_params
from .rpc import Client

Json = Any
Amount = Decimal | float
Outputs = Mapping[str, Amount] | Sequence[Mapping[str, Any]]


class Node(Client):
    """A wrapper around the Bitcoin Core JSON-RPC.

    Every method is named after the remote procedure it invokes and takes its
    arguments in the same positional order. Optional arguments left as None are
    not sent, so the node applies its own defaults. All methods return the
    decoded result, or None if the call failed for any reason; use dispatch()
    to find out why.
    """

    # Blockchain RPCs

    def getbestblockhash(self) -> Json:
        """Get the hash of the best (tip) block."""
        return self.call('getbestblockhash')

    def getblock(self, blockhash: str, verbose: bool = True) -> Json:
        """Get a block, fully decoded (verbose) or summarized."""
        verbosity = 2 if verbose else 1
        return self.call('getblock', build_params(blockhash, verbosity))

    def getblockchaininfo(self) -> Json:
        """Get the state of the blockchain."""
        return self.call('getblockchaininfo')

    def getblockcount(self) -> Json:
        """Get the height of the most-work fully-validated chain."""
        return self.call('getblockcount')

    def getblockfilter(self, blockhash: str, filtertype: str) -> Json:
        """Get the compact filter of a block."""
        return self.call('getblockfilter', build_params(blockhash, filtertype))

    def getblockhash(self, height: int) -> Json:
        """Get the hash of the block at the given height."""
        return self.call('getblockhash', build_params(height))

    def getblockheader(self, blockhash: str, verbose: bool = True) -> Json:
        """Get a block header, as an object (verbose) or as hex."""
        return self.call('getblockheader', build_params(blockhash, verbose))

    def getblockstats(
            self,
            hash_or_height: str | int,
            stats: Sequence[str] = (),
        ) -> Json:
        """Get per-block statistics, all of them if none are selected."""
        return self.call('getblockstats', build_params(hash_or_height, stats))

    def getchaintips(self) -> Json:
        """Get all known tips in the block tree."""
        return self.call('getchaintips')

    def getchaintxstats(
            self,
            nblocks: None | int = None,
            blockhash: None | str = None,
        ) -> Json:
        """Get transaction rate statistics over a window of blocks."""
        return self.call('getchaintxstats', build_params(nblocks, blockhash))

    def getdifficulty(self) -> Json:
        """Get the proof-of-work difficulty of the tip."""
        return self.call('getdifficulty')

    def getmempoolancestors(self, txid: str, verbose: bool = False) -> Json:
        """Get the in-mempool ancestors of a transaction."""
        return self.call('getmempoolancestors', build_params(txid, verbose))

    def getmempooldescendants(self, txid: str, verbose: bool = False) -> Json:
        """Get the in-mempool descendants of a transaction."""
        return self.call('getmempooldescendants', build_params(txid, verbose))

    def getmempoolentry(self, txid: str) -> Json:
        """Get the mempool data of a transaction."""
        return self.call('getmempoolentry', build_params(txid))

    def getmempoolinfo(self) -> Json:
        """Get the state of the mempool."""
        return self.call('getmempoolinfo')

    def getrawmempool(self, verbose: bool = False) -> Json:
        """Get all transaction ids (or entries, if verbose) in the mempool."""
        return self.call('getrawmempool', build_params(verbose))

    def gettxout(
            self,
            txid: str,
            n: int,
            include_mempool: bool = True,
        ) -> Json:
        """Get an unspent transaction output, or None if it is spent."""
        return self.call('gettxout', build_params(txid, n, include_mempool))

    def gettxoutproof(
            self,
            txids: Sequence[str],
            blockhash: None | str = None,
        ) -> Json:
        """Get a hex proof that the given transactions are in a block."""
        return self.call('gettxoutproof', build_params(txids, blockhash))

    def gettxoutsetinfo(self) -> Json:
        """Get statistics about the UTXO set."""
        return self.call('gettxoutsetinfo')

    def preciousblock(self, blockhash: str) -> Json:
        """Treat a block as if it had been received first at its height."""
        return self.call('preciousblock', build_params(blockhash))

    def pruneblockchain(self, height: int) -> Json:
        """Prune the block files up to a given height."""
        return self.call('pruneblockchain', build_params(height))

    def savemempool(self) -> Json:
        """Dump the mempool to disk."""
        return self.call('savemempool')

    def scantxoutset(
            self,
            descriptors: Sequence[str | Mapping[str, Any]],
            action: str = 'start',
        ) -> Json:
        """Scan the UTXO set for outputs matching the given descriptors."""
        return self.call('scantxoutset', build_params(action, descriptors))

    def verifychain(self, checklevel: int = 3, nblocks: int = 6) -> Json:
        """Verify the blockchain database."""
        return self.call('verifychain', build_params(checklevel, nblocks))

    def verifytxoutproof(self, proof: str) -> Json:
        """Verify a transaction proof, return the txids it commits to."""
        return self.call('verifytxoutproof', build_params(proof))

    # Control RPCs

    def getmemoryinfo(self) -> Json:
        """Get memory usage of the node."""
        return self.call('getmemoryinfo')

    def getrpcinfo(self) -> Json:
        """Get details of the RPC server."""
        return self.call('getrpcinfo')

    def help(self, command: None | str = None) -> Json:
        """Get the help text for a command, or the list of commands."""
        return self.call('help', build_params(command))

    def logging(
            self,
            include: Sequence[str] = (),
            exclude: Sequence[str] = (),
        ) -> Json:
        """Toggle debug logging categories on the node."""
        return self.call('logging', build_params(include, exclude))

    def stop(self) -> Json:
        """Request the node to shut down."""
        return self.call('stop')

    def uptime(self) -> Json:
        """Get the number of seconds the node has been running."""
        return self.call('uptime')

    # Generating RPCs

    def generateblock(self, output: str, transactions: Sequence[str]) -> Json:
        """Mine a block with a fixed set of transactions (regtest)."""
        return self.call('generateblock', build_params(output, transactions))

    def generatetoaddress(self, nblocks: int, address: str) -> Json:
        """Mine blocks paying the reward to an address (regtest)."""
        return self.call('generatetoaddress', build_params(nblocks, address))

    def generatetodescriptor(self, num_blocks: int, descriptor: str) -> Json:
        """Mine blocks paying the reward to a descriptor (regtest)."""
        params = build_params(num_blocks, descriptor)
        return self.call('generatetodescriptor', params)

    # Mining RPCs

    def getblocktemplate(
            self,
            template_request: None | Mapping[str, Any] = None,
        ) -> Json:
        """Get the data needed to construct a block to work on."""
        params = build_params(template_request)
        return self.call('getblocktemplate', params)

    def getmininginfo(self) -> Json:
        """Get the state of mining."""
        return self.call('getmininginfo')

    def getnetworkhashps(self, nblocks: int = 120, height: int = -1) -> Json:
        """Estimate the network hash rate over the last nblocks blocks."""
        return self.call('getnetworkhashps', build_params(nblocks, height))

    def prioritisetransaction(self, txid: str, fee_delta: int) -> Json:
        """Adjust the fee (in satoshis) used to prioritise a transaction."""
        # The second positional argument is a deprecated dummy
        params = build_params(txid, None, fee_delta)
        return self.call('prioritisetransaction', params)

    def submitblock(self, hexdata: str, dummy: None | str = None) -> Json:
        """Submit a new block, return None on acceptance."""
        return self.call('submitblock', build_params(hexdata, dummy))

    def submitheader(self, hexdata: str) -> Json:
        """Submit a block header as a candidate chain tip."""
        return self.call('submitheader', build_params(hexdata))

    # Network RPCs

    def addnode(self, node: str, command: str) -> Json:
        """Add, remove or try once a peer ("add", "remove", "onetry")."""
        return self.call('addnode', build_params(node, command))

    def clearbanned(self) -> Json:
        """Clear the list of banned peers."""
        return self.call('clearbanned')

    def disconnectnode(self, address: str) -> Json:
        """Disconnect from a peer."""
        return self.call('disconnectnode', build_params(address))

    def getaddednodeinfo(self, node: None | str = None) -> Json:
        """Get information about manually added peers."""
        return self.call('getaddednodeinfo', build_params(node))

    def getconnectioncount(self) -> Json:
        """Get the number of peer connections."""
        return self.call('getconnectioncount')

    def getnettotals(self) -> Json:
        """Get network traffic statistics."""
        return self.call('getnettotals')

    def getnetworkinfo(self) -> Json:
        """Get the state of the P2P network."""
        return self.call('getnetworkinfo')

    def getnodeaddresses(self, count: int = 1) -> Json:
        """Get known addresses of potential peers."""
        return self.call('getnodeaddresses', build_params(count))

    def getpeerinfo(self) -> Json:
        """Get data about each connected peer."""
        return self.call('getpeerinfo')

    def listbanned(self) -> Json:
        """List banned IPs and subnets."""
        return self.call('listbanned')

    def ping(self) -> Json:
        """Request a ping to be sent to all peers."""
        return self.call('ping')

    def setban(
            self,
            subnet: str,
            command: str,
            bantime: int = 0,
            absolute: bool = False,
        ) -> Json:
        """Add or remove an IP/subnet from the banned list."""
        params = build_params(subnet, command, bantime, absolute)
        return self.call('setban', params)

    def setnetworkactive(self, state: bool) -> Json:
        """Enable or disable all P2P network activity."""
        return self.call('setnetworkactive', build_params(state))

    # Raw transaction RPCs

    def analyzepsbt(self, psbt: str) -> Json:
        """Analyze a PSBT and tell what it needs next."""
        return self.call('analyzepsbt', build_params(psbt))

    def combinepsbt(self, txs: Sequence[str]) -> Json:
        """Combine several PSBTs for the same transaction."""
        return self.call('combinepsbt', build_params(txs))

    def combinerawtransaction(self, txs: Sequence[str]) -> Json:
        """Combine partially signed copies of a raw transaction."""
        return self.call('combinerawtransaction', build_params(txs))

    def converttopsbt(
            self,
            hexstring: str,
            permitsigdata: bool = False,
            iswitness: bool = True,
        ) -> Json:
        """Convert a network serialized transaction to a PSBT."""
        params = build_params(hexstring, permitsigdata, iswitness)
        return self.call('converttopsbt', params)

    def createpsbt(
            self,
            inputs: Sequence[Mapping[str, Any]],
            outputs: Outputs,
        ) -> Json:
        """Create an unsigned PSBT spending inputs to outputs."""
        return self.call('createpsbt', build_params(inputs, outputs))

    def createrawtransaction(
            self,
            inputs: Sequence[Mapping[str, Any]],
            outputs: Outputs,
        ) -> Json:
        """Create an unsigned transaction spending inputs to outputs."""
        params = build_params(inputs, outputs)
        return self.call('createrawtransaction', params)

    def decodepsbt(self, psbt: str) -> Json:
        """Decode a base64 PSBT."""
        return self.call('decodepsbt', build_params(psbt))

    def decoderawtransaction(
            self,
            hexstring: str | bytes,
            iswitness: bool = True,
        ) -> Json:
        """Decode a hex-encoded transaction."""
        params = build_params(hexstring, iswitness)
        return self.call('decoderawtransaction', params)

    def decodescript(self, hexstring: str | bytes) -> Json:
        """Decode a hex-encoded script."""
        return self.call('decodescript', build_params(hexstring))

    def finalizepsbt(self, psbt: str, extract: bool = True) -> Json:
        """Finalize a PSBT, extracting the network transaction if complete."""
        return self.call('finalizepsbt', build_params(psbt, extract))

    def fundrawtransaction(
            self,
            hexstring: str | bytes,
            options: None | Mapping[str, Any] = None,
        ) -> Json:
        """Add inputs (and a change output) to cover the outputs' value."""
        params = build_params(hexstring, options)
        return self.call('fundrawtransaction', params)

    def getrawtransaction(self, txid: str, verbose: bool = False) -> Json:
        """Get a transaction, as hex or decoded (verbose)."""
        return self.call('getrawtransaction', build_params(txid, verbose))

    def joinpsbts(self, txs: Sequence[str]) -> Json:
        """Join several PSBTs with distinct inputs into one."""
        return self.call('joinpsbts', build_params(txs))

    def sendrawtransaction(
            self,
            hexstring: str | bytes,
            maxfeerate: None | Amount | str = None,
        ) -> Json:
        """Broadcast a signed transaction, return its txid."""
        params = build_params(hexstring, maxfeerate)
        return self.call('sendrawtransaction', params)

    def signrawtransactionwithkey(
            self,
            hexstring: str | bytes,
            privkeys: Sequence[str],
            prevtxs: None | Sequence[Mapping[str, Any]] = None,
        ) -> Json:
        """Sign a raw transaction with the given private keys."""
        params = build_params(hexstring, privkeys, prevtxs)
        return self.call('signrawtransactionwithkey', params)

    def testmempoolaccept(
            self,
            rawtxs: Sequence[str | bytes],
            maxfeerate: None | Amount | str = None,
        ) -> Json:
        """Check whether raw transactions would be accepted to the mempool."""
        params = build_params(rawtxs, maxfeerate)
        return self.call('testmempoolaccept', params)

    def utxoupdatepsbt(
            self,
            psbt: str,
            descriptors: None | Sequence[str | Mapping[str, Any]] = None,
        ) -> Json:
        """Update a PSBT with UTXO data from the UTXO set or mempool."""
        return self.call('utxoupdatepsbt', build_params(psbt, descriptors))

    # Utility RPCs

    def createmultisig(self, nrequired: int, keys: Sequence[str]) -> Json:
        """Create a multisig address from public keys."""
        return self.call('createmultisig', build_params(nrequired, keys))

    def deriveaddresses(
            self,
            descriptor: str,
            index_range: None | int | Sequence[int] = None,
        ) -> Json:
        """Derive addresses from a descriptor, over a range if ranged."""
        return self.call('deriveaddresses', build_params(descriptor, index_range))

    def estimatesmartfee(
            self,
            conf_target: int,
            estimate_mode: str = 'CONSERVATIVE',
        ) -> Json:
        """Estimate the fee rate to confirm within conf_target blocks."""
        params = build_params(conf_target, estimate_mode)
        return self.call('estimatesmartfee', params)

    def getdescriptorinfo(self, descriptor: str) -> Json:
        """Analyze a descriptor and add its checksum."""
        return self.call('getdescriptorinfo', build_params(descriptor))

    def getindexinfo(self) -> Json:
        """Get the status of the optional indices."""
        return self.call('getindexinfo')

    def signmessagewithprivkey(self, privkey: str, message: str) -> Json:
        """Sign a message with a private key."""
        params = build_params(privkey, message)
        return self.call('signmessagewithprivkey', params)

    def validateaddress(self, address: str) -> Json:
        """Check whether an address is valid."""
        return self.call('validateaddress', build_params(address))

    def verifymessage(
            self,
            address: str,
            signature: str,
            message: str,
        ) -> Json:
        """Verify a signed message."""
        params = build_params(address, signature, message)
        return self.call('verifymessage', params)

    # Wallet RPCs

    def abandontransaction(self, txid: str) -> Json:
        """Mark an unconfirmed wallet transaction as abandoned."""
        return self.call('abandontransaction', build_params(txid))

    def abortrescan(self) -> Json:
        """Stop a running wallet rescan."""
        return self.call('abortrescan')

    def addmultisigaddress(
            self,
            nrequired: int,
            keys: Sequence[str],
            label: None | str = None,
        ) -> Json:
        """Add a multisig address to the wallet."""
        params = build_params(nrequired, keys, label)
        return self.call('addmultisigaddress', params)

    def backupwallet(self, destination: str) -> Json:
        """Copy the wallet file to a destination."""
        return self.call('backupwallet', build_params(destination))

    def bumpfee(
            self,
            txid: str,
            options: None | Mapping[str, Any] = None,
        ) -> Json:
        """Replace an unconfirmed wallet transaction with a higher-fee one."""
        return self.call('bumpfee', build_params(txid, options))

    def createwallet(
            self,
            wallet_name: str,
            disable_private_keys: bool = False,
            blank: bool = False,
        ) -> Json:
        """Create and load a new wallet."""
        params = build_params(wallet_name, disable_private_keys, blank)
        return self.call('createwallet', params)

    def dumpprivkey(self, address: str) -> Json:
        """Get the private key of a wallet address."""
        return self.call('dumpprivkey', build_params(address))

    def dumpwallet(self, filename: str) -> Json:
        """Dump all wallet keys to a file."""
        return self.call('dumpwallet', build_params(filename))

    def encryptwallet(self, passphrase: str) -> Json:
        """Encrypt the wallet with a passphrase."""
        return self.call('encryptwallet', build_params(passphrase))

    def getaddressesbylabel(self, label: str) -> Json:
        """Get the wallet addresses with a given label."""
        return self.call('getaddressesbylabel', build_params(label))

    def getaddressinfo(self, address: str) -> Json:
        """Get wallet data about an address."""
        return self.call('getaddressinfo', build_params(address))

    def getbalance(
            self,
            dummy: str = '*',
            minconf: int = 0,
            include_watchonly: bool = False,
        ) -> Json:
        """Get the total available balance of the wallet."""
        params = build_params(dummy, minconf, include_watchonly)
        return self.call('getbalance', params)

    def getbalances(self) -> Json:
        """Get all wallet balances in BTC."""
        return self.call('getbalances')

    def getnewaddress(self, label: None | str = None) -> Json:
        """Get a new address for receiving payments."""
        return self.call('getnewaddress', build_params(label))

    def getrawchangeaddress(self, address_type: None | str = None) -> Json:
        """Get a new change address."""
        return self.call('getrawchangeaddress', build_params(address_type))

    def getreceivedbyaddress(self, address: str, minconf: int = 1) -> Json:
        """Get the total amount received by an address."""
        params = build_params(address, minconf)
        return self.call('getreceivedbyaddress', params)

    def getreceivedbylabel(self, label: str, minconf: int = 1) -> Json:
        """Get the total amount received by addresses with a label."""
        return self.call('getreceivedbylabel', build_params(label, minconf))

    def gettransaction(
            self,
            txid: str,
            include_watchonly: bool = False,
        ) -> Json:
        """Get detailed information about an in-wallet transaction."""
        params = build_params(txid, include_watchonly)
        return self.call('gettransaction', params)

    def getunconfirmedbalance(self) -> Json:
        """Get the unconfirmed balance of the wallet."""
        return self.call('getunconfirmedbalance')

    def getwalletinfo(self) -> Json:
        """Get the state of the wallet."""
        return self.call('getwalletinfo')

    def importaddress(
            self,
            address: str,
            label: None | str = None,
            rescan: bool = True,
        ) -> Json:
        """Watch an address or script without its private key."""
        params = build_params(address, label, rescan)
        return self.call('importaddress', params)

    def importdescriptors(
            self,
            descriptor_requests: Sequence[Mapping[str, Any]],
        ) -> Json:
        """Import descriptors into a descriptor wallet."""
        return self.call('importdescriptors', build_params(descriptor_requests))

    def importmulti(
            self,
            import_requests: Sequence[Mapping[str, Any]],
            options: None | Mapping[str, Any] = None,
        ) -> Json:
        """Import addresses, scripts or keys in one rescan."""
        params = build_params(import_requests, options)
        return self.call('importmulti', params)

    def importprivkey(
            self,
            privkey: str,
            label: None | str = None,
            rescan: bool = True,
        ) -> Json:
        """Import a private key into the wallet."""
        params = build_params(privkey, label, rescan)
        return self.call('importprivkey', params)

    def importprunedfunds(self, rawtransaction: str, txoutproof: str) -> Json:
        """Import funds without a rescan, for pruned nodes."""
        params = build_params(rawtransaction, txoutproof)
        return self.call('importprunedfunds', params)

    def importpubkey(
            self,
            pubkey: str,
            label: None | str = None,
            rescan: bool = True,
        ) -> Json:
        """Watch a public key without its private key."""
        params = build_params(pubkey, label, rescan)
        return self.call('importpubkey', params)

    def importwallet(self, filename: str) -> Json:
        """Import keys from a wallet dump file."""
        return self.call('importwallet', build_params(filename))

    def keypoolrefill(self, newsize: int = 100) -> Json:
        """Fill the keypool up to a given size."""
        return self.call('keypoolrefill', build_params(newsize))

    def listaddressgroupings(self) -> Json:
        """List address groups with common ownership."""
        return self.call('listaddressgroupings')

    def listlabels(self) -> Json:
        """List wallet labels."""
        return self.call('listlabels')

    def listlockunspent(self) -> Json:
        """List temporarily unspendable outputs."""
        return self.call('listlockunspent')

    def listreceivedbyaddress(
            self,
            minconf: int = 1,
            include_empty: bool = False,
            include_watchonly: bool = False,
        ) -> Json:
        """List amounts received by each address."""
        params = build_params(minconf, include_empty, include_watchonly)
        return self.call('listreceivedbyaddress', params)

    def listreceivedbylabel(
            self,
            minconf: int = 1,
            include_empty: bool = False,
            include_watchonly: bool = False,
        ) -> Json:
        """List amounts received by each label."""
        params = build_params(minconf, include_empty, include_watchonly)
        return self.call('listreceivedbylabel', params)

    def listsinceblock(
            self,
            blockhash: None | str = None,
            target_confirmations: int = 1,
            include_watchonly: bool = False,
        ) -> Json:
        """List wallet transactions since a block, or all if none given."""
        params = build_params(blockhash, target_confirmations, include_watchonly)
        return self.call('listsinceblock', params)

    def listtransactions(
            self,
            label: None | str = '*',
            count: int = 10,
            skip: int = 0,
            include_watchonly: bool = False,
        ) -> Json:
        """List the most recent wallet transactions."""
        params = build_params(label, count, skip, include_watchonly)
        return self.call('listtransactions', params)

    def listunspent(
            self,
            minconf: int = 1,
            maxconf: int = 9999999,
            addresses: Sequence[str] = (),
            include_unsafe: bool = True,
        ) -> Json:
        """List unspent wallet outputs with confirmations in a range."""
        params = build_params(minconf, maxconf, addresses, include_unsafe)
        return self.call('listunspent', params)

    def listwalletdir(self) -> Json:
        """List wallets in the wallet directory."""
        return self.call('listwalletdir')

    def listwallets(self) -> Json:
        """List loaded wallets."""
        return self.call('listwallets')

    def loadwallet(self, filename: str) -> Json:
        """Load a wallet from a file or directory."""
        return self.call('loadwallet', build_params(filename))

    def lockunspent(
            self,
            unlock: bool,
            transactions: None | Sequence[Mapping[str, Any]] = None,
        ) -> Json:
        """Lock (unlock=False) or unlock outputs for automatic coin selection."""
        return self.call('lockunspent', build_params(unlock, transactions))

    def psbtbumpfee(
            self,
            txid: str,
            options: None | Mapping[str, Any] = None,
        ) -> Json:
        """Bump the fee of a wallet transaction, return a PSBT."""
        return self.call('psbtbumpfee', build_params(txid, options))

    def removeprunedfunds(self, txid: str) -> Json:
        """Remove an imported pruned transaction from the wallet."""
        return self.call('removeprunedfunds', build_params(txid))

    def rescanblockchain(
            self,
            start_height: None | int = None,
            stop_height: None | int = None,
        ) -> Json:
        """Rescan the chain for wallet transactions, tip if no stop height."""
        params = build_params(start_height, stop_height)
        return self.call('rescanblockchain', params)

    def send(
            self,
            outputs: Outputs,
            conf_target: int = 6,
            estimate_mode: str = 'UNSET',
            replaceable: bool = False,
        ) -> Json:
        """Send to the given outputs, return the txid or a PSBT."""
        # Positions: outputs, conf_target, estimate_mode, fee_rate, options
        options = {'replaceable': replaceable}
        params = build_params(outputs, conf_target, estimate_mode, None, options)
        return self.call('send', params)

    def sendmany(
            self,
            dummy: str,
            amounts: Mapping[str, Amount],
            minconf: int = 1,
            comment: None | str = None,
            subtractfeefrom: None | Sequence[str] = None,
        ) -> Json:
        """Send to multiple addresses in a single transaction."""
        params = build_params(dummy, amounts, minconf, comment, subtractfeefrom)
        return self.call('sendmany', params)

    def sendtoaddress(
            self,
            address: str,
            amount: Amount,
            comment: None | str = None,
            comment_to: None | str = None,
            subtractfeefromamount: bool = False,
        ) -> Json:
        """Send an amount to an address, return the txid."""
        params = build_params(
            address, amount, comment, comment_to, subtractfeefromamount,
        )
        return self.call('sendtoaddress', params)

    def sethdseed(self, newkeypool: bool = True, seed: None | str = None) -> Json:
        """Set or generate a new HD seed for the wallet."""
        return self.call('sethdseed', build_params(newkeypool, seed))

    def setlabel(self, address: str, label: str) -> Json:
        """Set the label of an address."""
        return self.call('setlabel', build_params(address, label))

    def settxfee(self, amount: Amount) -> Json:
        """Set the wallet fee rate in BTC/kvB."""
        return self.call('settxfee', build_params(amount))

    def setwalletflag(self, flag: str, value: bool = True) -> Json:
        """Set or unset a wallet flag."""
        return self.call('setwalletflag', build_params(flag, value))

    def signmessage(self, address: str, message: str) -> Json:
        """Sign a message with the key of a wallet address."""
        return self.call('signmessage', build_params(address, message))

    def signrawtransactionwithwallet(
            self,
            hexstring: str | bytes,
            prevtxs: None | Sequence[Mapping[str, Any]] = None,
        ) -> Json:
        """Sign a raw transaction with wallet keys."""
        params = build_params(hexstring, prevtxs)
        return self.call('signrawtransactionwithwallet', params)

    def unloadwallet(self, wallet_name: None | str = None) -> Json:
        """Unload a wallet."""
        return self.call('unloadwallet', build_params(wallet_name))

    def upgradewallet(self, version: None | int = None) -> Json:
        """Upgrade the wallet to a newer version."""
        return self.call('upgradewallet', build_params(version))

    def walletcreatefundedpsbt(
            self,
            inputs: Sequence[Mapping[str, Any]],
            outputs: Outputs,
            locktime: int = 0,
            options: None | Mapping[str, Any] = None,
        ) -> Json:
        """Create and fund a PSBT from the wallet."""
        params = build_params(inputs, outputs, locktime, options)
        return self.call('walletcreatefundedpsbt', params)

    def walletlock(self) -> Json:
        """Remove the wallet encryption key from memory."""
        return self.call('walletlock')

    def walletpassphrase(self, passphrase: str, timeout: int) -> Json:
        """Unlock the wallet for timeout seconds."""
        return self.call('walletpassphrase', build_params(passphrase, timeout))

    def walletpassphrasechange(
            self,
            oldpassphrase: str,
            newpassphrase: str,
        ) -> Json:
        """Change the wallet passphrase."""
        params = build_params(oldpassphrase, newpassphrase)
        return self.call('walletpassphrasechange', params)

    def walletprocesspsbt(
            self,
            psbt: str,
            sign: bool = True,
            sighashtype: str = 'ALL',
            bip32derivs: bool = True,
        ) -> Json:
        """Update a PSBT with wallet data and optionally sign it."""
        params = build_params(psbt, sign, sighashtype, bip32derivs)
        return self.call('walletprocesspsbt', params)
