"""ENS Registry ABI fragments."""

REGISTRY_ABI = [
  # owner(bytes32 node) → address
  {
    'inputs': [{'name': 'node', 'type': 'bytes32'}],
    'name': 'owner',
    'outputs': [{'name': '', 'type': 'address'}],
    'stateMutability': 'view',
    'type': 'function',
  },
  # resolver(bytes32 node) → address
  {
    'inputs': [{'name': 'node', 'type': 'bytes32'}],
    'name': 'resolver',
    'outputs': [{'name': '', 'type': 'address'}],
    'stateMutability': 'view',
    'type': 'function',
  },
  # setSubnodeRecord(bytes32 node, bytes32 label, address owner, address resolver, uint64 ttl)
  {
    'inputs': [
      {'name': 'node', 'type': 'bytes32'},
      {'name': 'label', 'type': 'bytes32'},
      {'name': 'owner', 'type': 'address'},
      {'name': 'resolver', 'type': 'address'},
      {'name': 'ttl', 'type': 'uint64'},
    ],
    'name': 'setSubnodeRecord',
    'outputs': [],
    'stateMutability': 'nonpayable',
    'type': 'function',
  },
  # setResolver(bytes32 node, address resolver)
  {
    'inputs': [
      {'name': 'node', 'type': 'bytes32'},
      {'name': 'resolver', 'type': 'address'},
    ],
    'name': 'setResolver',
    'outputs': [],
    'stateMutability': 'nonpayable',
    'type': 'function',
  },
]
