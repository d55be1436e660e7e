import json
import zlib

import cbor2
import pytest
from eth_abi import decode
from web3 import Web3

from enskit.contracts import PUBLIC_RESOLVER_ABI
from enskit.errors import UnknownContentTypeError
from enskit.utils.abi import decode_function_data, to_bytes
from enskit.utils.encoders import EncodedAbi, encode_abi, encode_multicall, encode_set_abi, encode_set_addr
from enskit.utils.normalise import namehash
from enskit.utils.records import generate_record_call_array

ABI = [{'inputs': [], 'name': 'test', 'outputs': [], 'type': 'function'}]
NODE = namehash('alice.eth')
ADDRESS = '0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045'


def test_encode_abi_content_types():
  encoded = encode_abi('json', ABI)
  assert encoded.content_type == 1
  assert json.loads(encoded.encoded_data) == ABI

  encoded = encode_abi('zlib', ABI)
  assert encoded.content_type == 2
  assert json.loads(zlib.decompress(encoded.encoded_data)) == ABI

  encoded = encode_abi('cbor', ABI)
  assert encoded.content_type == 4
  assert cbor2.loads(encoded.encoded_data) == ABI

  encoded = encode_abi('uri', 'https://example.com/abi.json')
  assert encoded == EncodedAbi(8, b'https://example.com/abi.json')


def test_encode_abi_json_is_compact():
  assert encode_abi('json', {'a': 1}).encoded_data == b'{"a":1}'


def test_encode_abi_empty_and_unknown():
  assert encode_abi('json', None) == EncodedAbi(0, b'')
  with pytest.raises(UnknownContentTypeError):
    encode_abi('yaml', ABI)


def test_encode_set_abi():
  data = encode_set_abi(NODE, 1, b'[]')
  assert data[:10] == '0x623195b0'
  assert decode_function_data(PUBLIC_RESOLVER_ABI, 'setABI', data) == (NODE, 1, b'[]')


def test_encode_set_abi_clear():
  data = encode_set_abi(NODE, 0, None)
  assert decode_function_data(PUBLIC_RESOLVER_ABI, 'setABI', data) == (NODE, 0, b'')


def test_encode_set_addr_eth_validates():
  data = encode_set_addr(NODE, 60, ADDRESS)
  _node, coin, value = decode_function_data(PUBLIC_RESOLVER_ABI, 'setAddr(bytes32,uint256,bytes)', data)
  assert coin == 60
  assert value == to_bytes(ADDRESS)
  with pytest.raises(ValueError):
    encode_set_addr(NODE, 60, '0x1234')


def test_generate_record_call_array_order():
  calls = generate_record_call_array(NODE, {
    'coins': [{'coin': 60, 'value': ADDRESS}],
    'texts': [{'key': 'url', 'value': 'https://ens.domains'}],
    'abi': encode_abi('json', ABI),
    'content_hash': '0xe301',
    'clear_records': True,
  })
  selectors = [call[:10] for call in calls]
  expected = [
    'clearRecords(bytes32)',
    'setContenthash(bytes32,bytes)',
    'setABI(bytes32,uint256,bytes)',
    'setText(bytes32,string,string)',
    'setAddr(bytes32,uint256,bytes)',
  ]
  assert selectors == [Web3.to_hex(Web3.keccak(text=sig)[:4]) for sig in expected]


def test_generate_record_call_array_empty():
  assert generate_record_call_array(NODE, None) == []
  assert generate_record_call_array(NODE, {}) == []


def test_encode_multicall():
  calls = generate_record_call_array(NODE, {'texts': [{'key': 'a', 'value': 'b'}]})
  data = encode_multicall(calls)
  assert data[:10] == '0xac9650d8'
  (inner,) = decode(['bytes[]'], to_bytes(data)[4:])
  assert inner == (to_bytes(calls[0]),)
