import logging
import os
import sys

from py_bitcoin_rpc.node import Node


# Sandbox
if __name__ == '__main__':
    logging.basicConfig(level=logging.WARNING)

    # Credentials of a local node
    user = os.environ.get('BITCOIN_RPC_USER', 'root')
    password = os.environ.get('BITCOIN_RPC_PASSWORD', 'rpcpassword')
    url = os.environ.get('BITCOIN_RPC_URL', 'http://127.0.0.1:8332/')
    node = Node(user, password, url)

    # Fetch blockchain information
    info = node.getblockchaininfo()
    if info is None:
        print('Failed to fetch blockchain information.', file=sys.stderr)
        sys.exit(1)

    print('Blockchain Information:')
    print(f"Chain: {info['chain']}")
    print(f"Blocks: {info['blocks']}")
    print(f"Headers: {info['headers']}")
    print(f"Best Block Hash: {info['bestblockhash']}")
    print(f"Difficulty: {info['difficulty']}")
    print(f"Verification Progress: {info['verificationprogress']}")
