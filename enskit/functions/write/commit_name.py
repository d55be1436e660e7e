"""
First step of a .eth registration: publish the commitment hash.

register_name can be called with the same parameters once the
controller's minimum commitment age has passed.
"""
from enskit.contracts import ETH_REGISTRAR_CONTROLLER_ABI, get_chain_contract_address
from enskit.utils.abi import encode_function_data
from enskit.utils.register_helpers import RegistrationParameters, make_commitment
from enskit.utils.web3_utils import resolve_chain_id, send_tx


def make_function_data(params: RegistrationParameters, chain_id: int | None = None) -> dict:
  return {
    'to': get_chain_contract_address(resolve_chain_id(chain_id), 'ens_eth_registrar_controller'),
    'data': encode_function_data(
      ETH_REGISTRAR_CONTROLLER_ABI,
      'commit',
      [make_commitment(params)],
    ),
  }


def commit_name(
  params: RegistrationParameters,
  chain_id: int | None = None,
  gas: int | None = None,
) -> str:
  """Send commit(commitment). Returns the tx hash."""
  return send_tx(make_function_data(params, chain_id), chain_id, gas=gas)


commit_name.make_function_data = make_function_data
