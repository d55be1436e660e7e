"""Check whether a .eth second-level name can be registered."""
from enskit.contracts import ETH_REGISTRAR_CONTROLLER_ABI, get_chain_contract_address
from enskit.functions.public.get_price import eth_2ld_label
from enskit.utils.abi import decode_function_result, encode_function_data
from enskit.utils.web3_utils import call, resolve_chain_id


def encode(name: str, chain_id: int | None = None) -> dict:
  return {
    'to': get_chain_contract_address(resolve_chain_id(chain_id), 'ens_eth_registrar_controller'),
    'data': encode_function_data(ETH_REGISTRAR_CONTROLLER_ABI, 'available', [eth_2ld_label(name)]),
  }


def decode(data) -> bool:
  (available,) = decode_function_result(ETH_REGISTRAR_CONTROLLER_ABI, 'available', data)
  return available


def get_available(name: str, chain_id: int | None = None) -> bool:
  return decode(call(encode(name, chain_id), chain_id))


get_available.encode = encode
get_available.decode = decode
