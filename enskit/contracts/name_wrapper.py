"""NameWrapper ABI fragments."""

NAME_WRAPPER_ABI = [
  # ownerOf(uint256 id) → address
  {
    'inputs': [{'name': 'id', 'type': 'uint256'}],
    'name': 'ownerOf',
    'outputs': [{'name': 'owner', 'type': 'address'}],
    'stateMutability': 'view',
    'type': 'function',
  },
  # getData(uint256 id) → (address owner, uint32 fuses, uint64 expiry)
  {
    'inputs': [{'name': 'id', 'type': 'uint256'}],
    'name': 'getData',
    'outputs': [
      {'name': 'owner', 'type': 'address'},
      {'name': 'fuses', 'type': 'uint32'},
      {'name': 'expiry', 'type': 'uint64'},
    ],
    'stateMutability': 'view',
    'type': 'function',
  },
  # setSubnodeRecord(bytes32 parentNode, string label, address owner, address resolver,
  #                  uint64 ttl, uint32 fuses, uint64 expiry) → bytes32
  {
    'inputs': [
      {'name': 'parentNode', 'type': 'bytes32'},
      {'name': 'label', 'type': 'string'},
      {'name': 'owner', 'type': 'address'},
      {'name': 'resolver', 'type': 'address'},
      {'name': 'ttl', 'type': 'uint64'},
      {'name': 'fuses', 'type': 'uint32'},
      {'name': 'expiry', 'type': 'uint64'},
    ],
    'name': 'setSubnodeRecord',
    'outputs': [{'name': 'node', 'type': 'bytes32'}],
    'stateMutability': 'nonpayable',
    'type': 'function',
  },
  # setRecord(bytes32 node, address owner, address resolver, uint64 ttl)
  {
    'inputs': [
      {'name': 'node', 'type': 'bytes32'},
      {'name': 'owner', 'type': 'address'},
      {'name': 'resolver', 'type': 'address'},
      {'name': 'ttl', 'type': 'uint64'},
    ],
    'name': 'setRecord',
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
