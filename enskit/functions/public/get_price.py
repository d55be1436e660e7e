"""Registration / renewal price from the ETHRegistrarController."""
from dataclasses import dataclass

from enskit.contracts import ETH_REGISTRAR_CONTROLLER_ABI, get_chain_contract_address
from enskit.errors import UnsupportedNameTypeError
from enskit.utils.abi import decode_function_result, encode_function_data
from enskit.utils.normalise import get_name_type, normalise
from enskit.utils.web3_utils import call, resolve_chain_id


@dataclass(frozen=True)
class Price:
  # wei
  base: int
  premium: int

  @property
  def total(self) -> int:
    return self.base + self.premium


def eth_2ld_label(name: str) -> str:
  """Label of a .eth second-level name; anything else is rejected."""
  name_type = get_name_type(name)
  if name_type != 'eth-2ld':
    raise UnsupportedNameTypeError(
      name_type,
      ['eth-2ld'],
      details='Only 2ld-eth names are handled by the registrar controller',
    )
  return normalise(name).split('.')[0]


def encode(name: str, duration: int, chain_id: int | None = None) -> dict:
  return {
    'to': get_chain_contract_address(resolve_chain_id(chain_id), 'ens_eth_registrar_controller'),
    'data': encode_function_data(
      ETH_REGISTRAR_CONTROLLER_ABI,
      'rentPrice',
      [eth_2ld_label(name), duration],
    ),
  }


def decode(data) -> Price:
  ((base, premium),) = decode_function_result(ETH_REGISTRAR_CONTROLLER_ABI, 'rentPrice', data)
  return Price(base=base, premium=premium)


def get_price(names: str | list[str], duration: int, chain_id: int | None = None) -> Price:
  """
  Price to register or renew one or more names for `duration` seconds.

  A list of names returns the summed price.
  """
  if isinstance(names, str):
    names = [names]
  requests = [encode(name, duration, chain_id) for name in names]
  base = premium = 0
  for request in requests:
    price = decode(call(request, chain_id))
    base += price.base
    premium += price.premium
  return Price(base=base, premium=premium)


get_price.encode = encode
get_price.decode = decode
