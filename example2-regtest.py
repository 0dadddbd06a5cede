import logging
import os

from py_bitcoin_rpc.node import Node
from py_bitcoin_rpc.transport import HttpTransport


# Example
if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    # A regtest node with a loaded wallet
    user = os.environ.get('BITCOIN_RPC_USER', 'root')
    password = os.environ.get('BITCOIN_RPC_PASSWORD', 'rpcpassword')
    url = os.environ.get('BITCOIN_RPC_URL', 'http://127.0.0.1:18443/')
    node = Node(user, password, url, transport=HttpTransport(timeout=30))

    # Mine some blocks to a fresh address
    address = node.getnewaddress('mining')
    hashes = node.generatetoaddress(101, address)
    print(f'Mined {len(hashes or [])} blocks')

    # Spend to a second address and confirm
    receiver = node.getnewaddress()
    txid = node.sendtoaddress(receiver, 1.5)
    node.generatetoaddress(1, address)
    print(node.gettransaction(txid))

    # An explicit outcome tells a remote error from a transport failure
    outcome = node.dispatch('getblockhash', [10**9])
    if not outcome:
        print(f'{outcome.kind.value}: {outcome.detail}')
