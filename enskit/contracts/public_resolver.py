"""PublicResolver ABI fragments."""

PUBLIC_RESOLVER_ABI = [
  # ABI(bytes32 node, uint256 contentTypes) → (uint256, bytes)
  {
    'inputs': [
      {'name': 'node', 'type': 'bytes32'},
      {'name': 'contentTypes', 'type': 'uint256'},
    ],
    'name': 'ABI',
    'outputs': [
      {'name': '', 'type': 'uint256'},
      {'name': '', 'type': 'bytes'},
    ],
    'stateMutability': 'view',
    'type': 'function',
  },
  # setABI(bytes32 node, uint256 contentType, bytes data)
  {
    'inputs': [
      {'name': 'node', 'type': 'bytes32'},
      {'name': 'contentType', 'type': 'uint256'},
      {'name': 'data', 'type': 'bytes'},
    ],
    'name': 'setABI',
    'outputs': [],
    'stateMutability': 'nonpayable',
    'type': 'function',
  },
  # text(bytes32 node, string key) → string
  {
    'inputs': [
      {'name': 'node', 'type': 'bytes32'},
      {'name': 'key', 'type': 'string'},
    ],
    'name': 'text',
    'outputs': [{'name': '', 'type': 'string'}],
    'stateMutability': 'view',
    'type': 'function',
  },
  # setText(bytes32 node, string key, string value)
  {
    'inputs': [
      {'name': 'node', 'type': 'bytes32'},
      {'name': 'key', 'type': 'string'},
      {'name': 'value', 'type': 'string'},
    ],
    'name': 'setText',
    'outputs': [],
    'stateMutability': 'nonpayable',
    'type': 'function',
  },
  # addr(bytes32 node) → address
  {
    'inputs': [{'name': 'node', 'type': 'bytes32'}],
    'name': 'addr',
    'outputs': [{'name': '', 'type': 'address'}],
    'stateMutability': 'view',
    'type': 'function',
  },
  # addr(bytes32 node, uint256 coinType) → bytes
  {
    'inputs': [
      {'name': 'node', 'type': 'bytes32'},
      {'name': 'coinType', 'type': 'uint256'},
    ],
    'name': 'addr',
    'outputs': [{'name': '', 'type': 'bytes'}],
    'stateMutability': 'view',
    'type': 'function',
  },
  # setAddr(bytes32 node, uint256 coinType, bytes a)
  {
    'inputs': [
      {'name': 'node', 'type': 'bytes32'},
      {'name': 'coinType', 'type': 'uint256'},
      {'name': 'a', 'type': 'bytes'},
    ],
    'name': 'setAddr',
    'outputs': [],
    'stateMutability': 'nonpayable',
    'type': 'function',
  },
  # contenthash(bytes32 node) → bytes
  {
    'inputs': [{'name': 'node', 'type': 'bytes32'}],
    'name': 'contenthash',
    'outputs': [{'name': '', 'type': 'bytes'}],
    'stateMutability': 'view',
    'type': 'function',
  },
  # setContenthash(bytes32 node, bytes hash)
  {
    'inputs': [
      {'name': 'node', 'type': 'bytes32'},
      {'name': 'hash', 'type': 'bytes'},
    ],
    'name': 'setContenthash',
    'outputs': [],
    'stateMutability': 'nonpayable',
    'type': 'function',
  },
  # clearRecords(bytes32 node)
  {
    'inputs': [{'name': 'node', 'type': 'bytes32'}],
    'name': 'clearRecords',
    'outputs': [],
    'stateMutability': 'nonpayable',
    'type': 'function',
  },
  # multicall(bytes[] data) → bytes[]
  {
    'inputs': [{'name': 'data', 'type': 'bytes[]'}],
    'name': 'multicall',
    'outputs': [{'name': 'results', 'type': 'bytes[]'}],
    'stateMutability': 'nonpayable',
    'type': 'function',
  },
]
