import pytest
from eth_abi import encode
from web3 import Web3

from enskit.contracts import PUBLIC_RESOLVER_ABI, UNIVERSAL_RESOLVER_ABI
from enskit.utils.abi import (
  decode_error_result,
  decode_function_data,
  decode_function_result,
  encode_function_data,
  to_bytes,
)

NODE = b'\x01' * 32


def test_known_selectors():
  assert encode_function_data(PUBLIC_RESOLVER_ABI, 'addr', [NODE])[:10] == '0x3b3b57de'
  assert encode_function_data(PUBLIC_RESOLVER_ABI, 'text', [NODE, 'avatar'])[:10] == '0x59d1d43c'
  assert encode_function_data(
    UNIVERSAL_RESOLVER_ABI, 'resolve(bytes,bytes)', [b'\x00', b''],
  )[:10] == '0x9061b923'


def test_overload_picked_by_arg_count():
  data = encode_function_data(PUBLIC_RESOLVER_ABI, 'addr', [NODE, 0])
  assert data[:10] == '0xf1cb7e06'
  assert to_bytes(data)[4:] == encode(['bytes32', 'uint256'], [NODE, 0])


def test_ambiguous_decode_needs_signature():
  with pytest.raises(ValueError):
    decode_function_result(PUBLIC_RESOLVER_ABI, 'addr', b'')


def test_unknown_function():
  with pytest.raises(ValueError):
    encode_function_data(PUBLIC_RESOLVER_ABI, 'nope', [])


def test_decode_checksums_addresses():
  address = '0xd8da6bf26964af9d7eed9e03e53415d37aa96045'
  data = encode(['address'], [address])
  (decoded,) = decode_function_result(PUBLIC_RESOLVER_ABI, 'addr(bytes32)', data)
  assert decoded == Web3.to_checksum_address(address)


def test_decode_function_data_checks_selector():
  data = encode_function_data(PUBLIC_RESOLVER_ABI, 'text', [NODE, 'url'])
  assert decode_function_data(PUBLIC_RESOLVER_ABI, 'text', data) == (NODE, 'url')
  with pytest.raises(ValueError):
    decode_function_data(PUBLIC_RESOLVER_ABI, 'setText', data)


def test_decode_error_result():
  data = Web3.keccak(text='ResolverNotFound()')[:4]
  assert decode_error_result(UNIVERSAL_RESOLVER_ABI, data) == ('ResolverNotFound', ())

  payload = b'\xde\xad'
  data = Web3.keccak(text='ResolverError(bytes)')[:4] + encode(['bytes'], [payload])
  assert decode_error_result(UNIVERSAL_RESOLVER_ABI, data) == ('ResolverError', (payload,))


def test_decode_error_tuple_array():
  data = Web3.keccak(text='HttpError((uint16,string)[])')[:4] + encode(
    ['(uint16,string)[]'], [[(404, 'not found')]],
  )
  name, args = decode_error_result(UNIVERSAL_RESOLVER_ABI, data)
  assert name == 'HttpError'
  assert args == ([(404, 'not found')],)


def test_decode_error_unknown():
  assert decode_error_result(UNIVERSAL_RESOLVER_ABI, b'\x00\x00\x00\x00') is None
  assert decode_error_result(UNIVERSAL_RESOLVER_ABI, b'') is None
