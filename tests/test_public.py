import json
import zlib

import cbor2
import pytest
from eth_abi import encode
from web3 import Web3

from enskit.contracts import (
  CONTRACT_ADDRESSES,
  NAME_WRAPPER_ABI,
  PUBLIC_RESOLVER_ABI,
  UNIVERSAL_RESOLVER_ABI,
)
from enskit.errors import (
  CallReverted,
  InvalidContractTypeError,
  UniversalResolverError,
  UnsupportedNameTypeError,
)
from enskit.functions.public import (
  get_abi_record,
  get_address_record,
  get_available,
  get_content_hash_record,
  get_name,
  get_owner,
  get_price,
  get_resolver,
  get_text_record,
  get_wrapper_data,
)
from enskit.functions.public import OwnerResult
from enskit.functions.public.get_abi_record import DecodedAbi, decode_abi_result
from enskit.functions.public.get_abi_record import encode as encode_get_abi_record
from enskit.utils.abi import decode_function_data, to_bytes
from enskit.utils.encoders import SUPPORTED_CONTENT_TYPES
from enskit.utils.normalise import dns_encode, namehash

RESOLVER = '0x231b0Ee14048e9dCcD1d247744d114a4EB5E8E63'
ADDRESS = '0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045'
ABI = [{'inputs': [], 'name': 'test', 'outputs': [], 'type': 'function'}]


def _wrap(types, values) -> bytes:
  """Shape a UniversalResolver.resolve(bytes,bytes) response."""
  return encode(['bytes', 'address'], [encode(types, values), RESOLVER])


def _error(signature: str, types=(), values=()) -> bytes:
  return bytes(Web3.keccak(text=signature)[:4]) + encode(list(types), list(values))


# ─────────────────────────────────────────────────────────────────────────────
# ABI record
# ─────────────────────────────────────────────────────────────────────────────

def test_get_abi_record_encode():
  request = encode_get_abi_record('alice.eth', chain_id=1)
  assert request['to'] == Web3.to_checksum_address(CONTRACT_ADDRESSES[1]['ens_universal_resolver'])

  name, inner = decode_function_data(UNIVERSAL_RESOLVER_ABI, 'resolve(bytes,bytes)', request['data'])
  assert name == dns_encode('alice.eth')
  assert decode_function_data(PUBLIC_RESOLVER_ABI, 'ABI', inner) == (
    namehash('alice.eth'), SUPPORTED_CONTENT_TYPES,
  )


@pytest.mark.parametrize('content_type, payload, expected', [
  (1, json.dumps(ABI).encode(), ABI),
  (2, zlib.compress(json.dumps(ABI).encode()), ABI),
  (4, cbor2.dumps(ABI), ABI),
  (8, b'https://example.com/abi.json', 'https://example.com/abi.json'),
  (16, b'plain text', 'plain text'),
])
def test_decode_abi_content_types(content_type, payload, expected):
  result = decode_abi_result(encode(['uint256', 'bytes'], [content_type, payload]))
  assert result == DecodedAbi(content_type, True, expected)


def test_decode_abi_undecodable_payload():
  result = decode_abi_result(encode(['uint256', 'bytes'], [16, b'\xff\xfe']))
  assert result == DecodedAbi(16, False, '0xfffe')


def test_decode_abi_empty():
  assert decode_abi_result(b'') is None
  assert decode_abi_result(encode(['uint256', 'bytes'], [0, b''])) is None
  assert decode_abi_result(encode(['uint256', 'bytes'], [1, b''])) is None


def test_get_abi_record(mock_w3):
  mock_w3.eth.call.return_value = _wrap(['uint256', 'bytes'], [1, json.dumps(ABI).encode()])
  assert get_abi_record('alice.eth') == DecodedAbi(1, True, ABI)


def test_get_abi_record_resolver_not_found(mock_w3):
  mock_w3.eth.call.side_effect = CallReverted(_error('ResolverNotFound()'))
  assert get_abi_record('nobody.eth') is None


def test_get_abi_record_resolver_error_raises(mock_w3):
  mock_w3.eth.call.side_effect = CallReverted(_error('ResolverError(bytes)', ['bytes'], [b'\x01']))
  with pytest.raises(UniversalResolverError) as exc:
    get_abi_record('broken.eth')
  assert exc.value.error_name == 'ResolverError'


def test_unknown_revert_is_reraised(mock_w3):
  mock_w3.eth.call.side_effect = CallReverted(b'\x12\x34\x56\x78')
  with pytest.raises(CallReverted):
    get_abi_record('broken.eth')


# ─────────────────────────────────────────────────────────────────────────────
# Text / address / contenthash records
# ─────────────────────────────────────────────────────────────────────────────

def test_get_text_record(mock_w3):
  mock_w3.eth.call.return_value = _wrap(['string'], ['https://ens.domains'])
  assert get_text_record('alice.eth', 'url') == 'https://ens.domains'


def test_get_text_record_empty(mock_w3):
  mock_w3.eth.call.return_value = _wrap(['string'], [''])
  assert get_text_record('alice.eth', 'url') is None


def test_get_address_record_eth(mock_w3):
  mock_w3.eth.call.return_value = _wrap(['address'], [ADDRESS.lower()])
  assert get_address_record('alice.eth') == ADDRESS


def test_get_address_record_unset(mock_w3):
  mock_w3.eth.call.return_value = _wrap(['address'], ['0x' + '00' * 20])
  assert get_address_record('alice.eth') is None


def test_get_address_record_other_coin(mock_w3):
  mock_w3.eth.call.return_value = _wrap(['bytes'], [b'\x76\xa9\x14'])
  assert get_address_record('alice.eth', coin=0) == '0x76a914'


def test_get_address_record_evm_coin_checksummed(mock_w3):
  mock_w3.eth.call.return_value = _wrap(['bytes'], [to_bytes(ADDRESS)])
  assert get_address_record('alice.eth', coin=0x80000000 | 10) == ADDRESS


def test_get_content_hash_record(mock_w3):
  mock_w3.eth.call.return_value = _wrap(['bytes'], [b'\xe3\x01'])
  assert get_content_hash_record('alice.eth') == '0xe301'
  mock_w3.eth.call.return_value = _wrap(['bytes'], [b''])
  assert get_content_hash_record('alice.eth') is None


# ─────────────────────────────────────────────────────────────────────────────
# Resolver / reverse name
# ─────────────────────────────────────────────────────────────────────────────

def test_get_resolver(mock_w3):
  mock_w3.eth.call.return_value = encode(['address', 'bytes32'], [RESOLVER, namehash('alice.eth')])
  assert get_resolver('alice.eth') == RESOLVER


def test_get_resolver_none(mock_w3):
  mock_w3.eth.call.return_value = encode(['address', 'bytes32'], ['0x' + '00' * 20, b'\x00' * 32])
  assert get_resolver('alice.eth') is None


def test_get_name(mock_w3):
  mock_w3.eth.call.return_value = encode(
    ['string', 'address', 'address', 'address'],
    ['alice.eth', ADDRESS, RESOLVER, RESOLVER],
  )
  result = get_name(ADDRESS.lower())
  assert result.name == 'alice.eth'
  assert result.match is True
  assert result.resolver_address == RESOLVER

  (reverse_name,) = decode_function_data(
    UNIVERSAL_RESOLVER_ABI, 'reverse', mock_w3.eth.call.call_args.args[0]['data'],
  )
  assert reverse_name == dns_encode(f'{ADDRESS[2:].lower()}.addr.reverse')


def test_get_name_mismatch(mock_w3):
  mock_w3.eth.call.return_value = encode(
    ['string', 'address', 'address', 'address'],
    ['alice.eth', RESOLVER, RESOLVER, RESOLVER],
  )
  assert get_name(ADDRESS).match is False


def test_get_name_unset(mock_w3):
  mock_w3.eth.call.side_effect = CallReverted(_error('ResolverNotFound()'))
  assert get_name(ADDRESS) is None


# ─────────────────────────────────────────────────────────────────────────────
# Owner / wrapper data
# ─────────────────────────────────────────────────────────────────────────────

def test_get_owner_registry(mock_w3):
  mock_w3.eth.call.return_value = encode(['address'], [ADDRESS])
  result = get_owner('alice.eth')
  assert result.owner == ADDRESS
  assert result.ownership_level == 'registry'


def test_get_owner_follows_name_wrapper(mock_w3):
  name_wrapper = CONTRACT_ADDRESSES[1]['ens_name_wrapper']
  mock_w3.eth.call.side_effect = [
    encode(['address'], [name_wrapper]),
    encode(['address'], [ADDRESS]),
  ]
  result = get_owner('wrapped.eth')
  assert result.owner == ADDRESS
  assert result.ownership_level == 'nameWrapper'

  second = mock_w3.eth.call.call_args_list[1].args[0]
  assert second['to'] == Web3.to_checksum_address(name_wrapper)
  (token_id,) = decode_function_data(NAME_WRAPPER_ABI, 'ownerOf', second['data'])
  assert token_id == int.from_bytes(namehash('wrapped.eth'), 'big')


def test_get_owner_unowned(mock_w3):
  mock_w3.eth.call.return_value = encode(['address'], ['0x' + '00' * 20])
  assert get_owner('nobody.eth') is None


def test_get_owner_invalid_contract():
  with pytest.raises(InvalidContractTypeError):
    get_owner('alice.eth', contract='baseRegistrar')


def test_get_wrapper_data(mock_w3):
  mock_w3.eth.call.return_value = encode(['address', 'uint32', 'uint64'], [ADDRESS, 1 | (1 << 16), 2000000000])
  result = get_wrapper_data('wrapped.eth')
  assert result.owner == ADDRESS
  assert result.expiry == 2000000000
  assert result.fuses['child']['cannot_unwrap'] is True
  assert result.fuses['parent']['parent_cannot_control'] is True


def test_get_wrapper_data_unwrapped(mock_w3):
  mock_w3.eth.call.return_value = encode(['address', 'uint32', 'uint64'], ['0x' + '00' * 20, 0, 0])
  assert get_wrapper_data('alice.eth') is None


# ─────────────────────────────────────────────────────────────────────────────
# Registrar controller
# ─────────────────────────────────────────────────────────────────────────────

def test_get_price_sums_names(mock_w3):
  mock_w3.eth.call.side_effect = [
    encode(['(uint256,uint256)'], [(100, 5)]),
    encode(['(uint256,uint256)'], [(200, 0)]),
  ]
  price = get_price(['alice.eth', 'bob.eth'], 31536000)
  assert (price.base, price.premium, price.total) == (300, 5, 305)


def test_get_price_rejects_subnames():
  with pytest.raises(UnsupportedNameTypeError):
    get_price('sub.alice.eth', 31536000)


def test_get_available(mock_w3):
  mock_w3.eth.call.return_value = encode(['bool'], [True])
  assert get_available('alice.eth') is True


@pytest.mark.parametrize('signature', ['ResolverWildcardNotSupported()', 'ResolverNotContract()'])
def test_soft_resolver_errors_return_none(mock_w3, signature):
  mock_w3.eth.call.side_effect = CallReverted(_error(signature))
  assert get_text_record('sub.nobody.eth', 'url') is None
  assert get_address_record('sub.nobody.eth') is None


def test_http_error_raises(mock_w3):
  mock_w3.eth.call.side_effect = CallReverted(
    _error('HttpError((uint16,string)[])', ['(uint16,string)[]'], [[(404, 'not found')]]),
  )
  with pytest.raises(UniversalResolverError) as exc:
    get_text_record('offchain.eth', 'url')
  assert exc.value.error_name == 'HttpError'
  assert exc.value.error_args == ([(404, 'not found')],)


def test_get_available_rejects_subnames(mock_w3):
  with pytest.raises(UnsupportedNameTypeError):
    get_available('sub.alice.eth')
  mock_w3.eth.call.assert_not_called()


def test_get_owner_forced_name_wrapper(mock_w3):
  mock_w3.eth.call.return_value = encode(['address'], [ADDRESS])
  result = get_owner('wrapped.eth', contract='nameWrapper')
  assert result == OwnerResult(ADDRESS, 'nameWrapper')

  request = mock_w3.eth.call.call_args.args[0]
  assert request['to'] == Web3.to_checksum_address(CONTRACT_ADDRESSES[1]['ens_name_wrapper'])
  assert mock_w3.eth.call.call_count == 1


def test_get_owner_forced_name_wrapper_unowned(mock_w3):
  mock_w3.eth.call.return_value = encode(['address'], ['0x' + '00' * 20])
  assert get_owner('wrapped.eth', contract='nameWrapper') is None


def test_rejected_reads_make_no_calls(mock_w3):
  with pytest.raises(UnsupportedNameTypeError):
    get_price(['alice.eth', 'sub.alice.eth'], 31536000)
  with pytest.raises(InvalidContractTypeError):
    get_owner('alice.eth', contract='baseRegistrar')
  mock_w3.eth.call.assert_not_called()


def test_readers_carry_their_encoders():
  assert get_abi_record.encode is encode_get_abi_record
  assert callable(get_text_record.decode)
  assert callable(get_owner.encode)
