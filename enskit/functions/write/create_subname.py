"""Create a subname in the registry or the NameWrapper."""
from enskit.contracts import (
  EMPTY_ADDRESS,
  NAME_WRAPPER_ABI,
  REGISTRY_ABI,
  get_chain_contract_address,
)
from enskit.errors import (
  AdditionalParameterSpecifiedError,
  InvalidContractTypeError,
  UnsupportedNameTypeError,
)
from enskit.utils.abi import encode_function_data
from enskit.utils.fuses import encode_fuses
from enskit.utils.normalise import get_name_type, make_label_node_and_parent
from enskit.utils.web3_utils import resolve_chain_id, send_tx
from enskit.utils.wrapper import expiry_to_int, wrapped_label_length_check

# .eth 2lds come from the registrar, see register_name
CREATABLE_TYPES = ['eth-subname', 'other-2ld', 'other-subname']
CONTRACTS = ['registry', 'nameWrapper']


def _fuses_value(fuses) -> int:
  if not fuses:
    return 0
  if isinstance(fuses, int):
    return fuses
  return encode_fuses(fuses)


def make_function_data(
  name: str,
  contract: str,
  owner: str,
  resolver_address: str | None = None,
  expiry=None,
  fuses=None,
  chain_id: int | None = None,
) -> dict:
  name_type = get_name_type(name)
  if name_type not in CREATABLE_TYPES:
    raise UnsupportedNameTypeError(
      name_type,
      CREATABLE_TYPES,
      details='Cannot create a name at this level with create_subname',
    )

  chain_id = resolve_chain_id(chain_id)
  resolver = resolver_address or EMPTY_ADDRESS

  if contract == 'registry':
    for parameter, value in (('fuses', fuses), ('expiry', expiry)):
      if value:
        raise AdditionalParameterSpecifiedError(
          parameter,
          ['name', 'contract', 'owner', 'resolver_address'],
          details=f'{parameter} is only supported by the nameWrapper contract',
        )
    _label, label_hash, parent_node = make_label_node_and_parent(name)
    return {
      'to': get_chain_contract_address(chain_id, 'ens_registry'),
      'data': encode_function_data(
        REGISTRY_ABI,
        'setSubnodeRecord',
        [parent_node, label_hash, owner, resolver, 0],
      ),
    }

  if contract == 'nameWrapper':
    label, _label_hash, parent_node = make_label_node_and_parent(name)
    wrapped_label_length_check(label)
    return {
      'to': get_chain_contract_address(chain_id, 'ens_name_wrapper'),
      'data': encode_function_data(
        NAME_WRAPPER_ABI,
        'setSubnodeRecord',
        [parent_node, label, owner, resolver, 0, _fuses_value(fuses), expiry_to_int(expiry)],
      ),
    }

  raise InvalidContractTypeError(contract, CONTRACTS)


def create_subname(
  name: str,
  contract: str,
  owner: str,
  resolver_address: str | None = None,
  expiry=None,
  fuses=None,
  chain_id: int | None = None,
  gas: int | None = None,
) -> str:
  """
  Create a subname owned by `owner`.

  Args:
    name: Full subname (e.g. 'sub.alice.eth')
    contract: 'registry' or 'nameWrapper'
    owner: Owner of the new subname
    resolver_address: Resolver to set (default none)
    expiry: NameWrapper expiry (int, str or datetime)
    fuses: NameWrapper fuses (int or list of fuse names)

  Returns:
    Transaction hash
  """
  request = make_function_data(
    name, contract, owner, resolver_address, expiry, fuses, chain_id,
  )
  return send_tx(request, chain_id, gas=gas)


create_subname.make_function_data = make_function_data
