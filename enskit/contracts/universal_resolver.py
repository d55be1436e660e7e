"""
UniversalResolver ABI fragments.

The custom errors are shared by every function; decoders match revert
data against them to tell "no resolver" apart from real failures.
"""

UNIVERSAL_RESOLVER_ERRORS = [
  {
    'inputs': [],
    'name': 'ResolverNotFound',
    'type': 'error',
  },
  {
    'inputs': [],
    'name': 'ResolverWildcardNotSupported',
    'type': 'error',
  },
  {
    'inputs': [],
    'name': 'ResolverNotContract',
    'type': 'error',
  },
  {
    'inputs': [{'name': 'returnData', 'type': 'bytes'}],
    'name': 'ResolverError',
    'type': 'error',
  },
  {
    'inputs': [
      {
        'name': 'errors',
        'type': 'tuple[]',
        'components': [
          {'name': 'status', 'type': 'uint16'},
          {'name': 'message', 'type': 'string'},
        ],
      },
    ],
    'name': 'HttpError',
    'type': 'error',
  },
]

UNIVERSAL_RESOLVER_ABI = [
  *UNIVERSAL_RESOLVER_ERRORS,
  # resolve(bytes name, bytes data) → (bytes data, address resolver)
  {
    'inputs': [
      {'name': 'name', 'type': 'bytes'},
      {'name': 'data', 'type': 'bytes'},
    ],
    'name': 'resolve',
    'outputs': [
      {'name': 'data', 'type': 'bytes'},
      {'name': 'resolver', 'type': 'address'},
    ],
    'stateMutability': 'view',
    'type': 'function',
  },
  # resolve(bytes name, bytes[] data) → ((bool success, bytes returnData)[], address)
  {
    'inputs': [
      {'name': 'name', 'type': 'bytes'},
      {'name': 'data', 'type': 'bytes[]'},
    ],
    'name': 'resolve',
    'outputs': [
      {
        'name': '',
        'type': 'tuple[]',
        'components': [
          {'name': 'success', 'type': 'bool'},
          {'name': 'returnData', 'type': 'bytes'},
        ],
      },
      {'name': '', 'type': 'address'},
    ],
    'stateMutability': 'view',
    'type': 'function',
  },
  # reverse(bytes reverseName) → (string, address, address, address)
  {
    'inputs': [{'name': 'reverseName', 'type': 'bytes'}],
    'name': 'reverse',
    'outputs': [
      {'name': 'resolvedName', 'type': 'string'},
      {'name': 'resolvedAddress', 'type': 'address'},
      {'name': 'reverseResolver', 'type': 'address'},
      {'name': 'resolver', 'type': 'address'},
    ],
    'stateMutability': 'view',
    'type': 'function',
  },
  # findResolver(bytes name) → (address, bytes32)
  {
    'inputs': [{'name': 'name', 'type': 'bytes'}],
    'name': 'findResolver',
    'outputs': [
      {'name': '', 'type': 'address'},
      {'name': '', 'type': 'bytes32'},
    ],
    'stateMutability': 'view',
    'type': 'function',
  },
]
