"""ETHRegistrarController ABI fragments."""

# (string name, address owner, uint256 duration, bytes32 secret, address resolver,
#  bytes[] data, bool reverseRecord, uint16 ownerControlledFuses)
_REGISTRATION_INPUTS = [
  {'name': 'name', 'type': 'string'},
  {'name': 'owner', 'type': 'address'},
  {'name': 'duration', 'type': 'uint256'},
  {'name': 'secret', 'type': 'bytes32'},
  {'name': 'resolver', 'type': 'address'},
  {'name': 'data', 'type': 'bytes[]'},
  {'name': 'reverseRecord', 'type': 'bool'},
  {'name': 'ownerControlledFuses', 'type': 'uint16'},
]

ETH_REGISTRAR_CONTROLLER_ABI = [
  # commit(bytes32 commitment)
  {
    'inputs': [{'name': 'commitment', 'type': 'bytes32'}],
    'name': 'commit',
    'outputs': [],
    'stateMutability': 'nonpayable',
    'type': 'function',
  },
  # commitments(bytes32) → uint256
  {
    'inputs': [{'name': '', 'type': 'bytes32'}],
    'name': 'commitments',
    'outputs': [{'name': '', 'type': 'uint256'}],
    'stateMutability': 'view',
    'type': 'function',
  },
  # makeCommitment(...) → bytes32
  {
    'inputs': _REGISTRATION_INPUTS,
    'name': 'makeCommitment',
    'outputs': [{'name': '', 'type': 'bytes32'}],
    'stateMutability': 'pure',
    'type': 'function',
  },
  # register(...) payable
  {
    'inputs': _REGISTRATION_INPUTS,
    'name': 'register',
    'outputs': [],
    'stateMutability': 'payable',
    'type': 'function',
  },
  # renew(string name, uint256 duration) payable
  {
    'inputs': [
      {'name': 'name', 'type': 'string'},
      {'name': 'duration', 'type': 'uint256'},
    ],
    'name': 'renew',
    'outputs': [],
    'stateMutability': 'payable',
    'type': 'function',
  },
  # rentPrice(string name, uint256 duration) → (uint256 base, uint256 premium)
  {
    'inputs': [
      {'name': 'name', 'type': 'string'},
      {'name': 'duration', 'type': 'uint256'},
    ],
    'name': 'rentPrice',
    'outputs': [
      {
        'name': 'price',
        'type': 'tuple',
        'components': [
          {'name': 'base', 'type': 'uint256'},
          {'name': 'premium', 'type': 'uint256'},
        ],
      },
    ],
    'stateMutability': 'view',
    'type': 'function',
  },
  # available(string name) → bool
  {
    'inputs': [{'name': 'name', 'type': 'string'}],
    'name': 'available',
    'outputs': [{'name': '', 'type': 'bool'}],
    'stateMutability': 'view',
    'type': 'function',
  },
]
