"""Second step of a .eth registration, and renewals."""
from enskit.contracts import ETH_REGISTRAR_CONTROLLER_ABI, get_chain_contract_address
from enskit.functions.public.get_price import eth_2ld_label
from enskit.utils.abi import encode_function_data
from enskit.utils.register_helpers import RegistrationParameters, make_registration_tuple
from enskit.utils.web3_utils import resolve_chain_id, send_tx


def make_function_data(params: RegistrationParameters, chain_id: int | None = None) -> dict:
  return {
    'to': get_chain_contract_address(resolve_chain_id(chain_id), 'ens_eth_registrar_controller'),
    'data': encode_function_data(
      ETH_REGISTRAR_CONTROLLER_ABI,
      'register',
      list(make_registration_tuple(params)),
    ),
  }


def register_name(
  params: RegistrationParameters,
  value: int,
  chain_id: int | None = None,
  gas: int | None = None,
) -> str:
  """
  Register a committed name.

  Args:
    params: The same parameters passed to commit_name
    value: Wei to pay; get_price(...).total plus some headroom for
           price movement, the controller refunds the excess

  Returns:
    Transaction hash
  """
  return send_tx(make_function_data(params, chain_id), chain_id, gas=gas, value=value)


def make_renew_function_data(name: str, duration: int, chain_id: int | None = None) -> dict:
  return {
    'to': get_chain_contract_address(resolve_chain_id(chain_id), 'ens_eth_registrar_controller'),
    'data': encode_function_data(
      ETH_REGISTRAR_CONTROLLER_ABI,
      'renew',
      [eth_2ld_label(name), duration],
    ),
  }


def renew_name(
  name: str,
  duration: int,
  value: int,
  chain_id: int | None = None,
  gas: int | None = None,
) -> str:
  """Extend a .eth name by `duration` seconds. Returns the tx hash."""
  return send_tx(make_renew_function_data(name, duration, chain_id), chain_id, gas=gas, value=value)


register_name.make_function_data = make_function_data
renew_name.make_function_data = make_renew_function_data
