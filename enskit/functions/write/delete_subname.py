"""
Delete a subname by zeroing its owner, resolver and TTL.

Which call is made depends on the contract holding the name:
  registry:     Registry.setSubnodeRecord(parentNode, labelhash, 0x0, 0x0, 0)
  nameWrapper:  NameWrapper.setSubnodeRecord(parentNode, label, 0x0, 0x0, 0, 0, 0)
                (parent owner), or NameWrapper.setRecord(node, 0x0, 0x0, 0)
                when as_owner is set (name owner)
"""
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
from enskit.utils.normalise import get_name_type, make_label_node_and_parent, namehash
from enskit.utils.web3_utils import resolve_chain_id, send_tx

SUBNAME_TYPES = ['eth-subname', 'other-subname']
CONTRACTS = ['registry', 'nameWrapper']


def make_function_data(
  name: str,
  contract: str,
  as_owner: bool = False,
  chain_id: int | None = None,
) -> dict:
  name_type = get_name_type(name)
  if name_type not in SUBNAME_TYPES:
    raise UnsupportedNameTypeError(
      name_type,
      SUBNAME_TYPES,
      details='Cannot delete a name that is not a subname',
    )

  chain_id = resolve_chain_id(chain_id)

  if contract == 'registry':
    if as_owner:
      raise AdditionalParameterSpecifiedError(
        'as_owner',
        ['name', 'contract'],
        details='Deleting a subname as the name owner is not supported by the registry contract',
      )
    _label, label_hash, parent_node = make_label_node_and_parent(name)
    return {
      'to': get_chain_contract_address(chain_id, 'ens_registry'),
      'data': encode_function_data(
        REGISTRY_ABI,
        'setSubnodeRecord',
        [parent_node, label_hash, EMPTY_ADDRESS, EMPTY_ADDRESS, 0],
      ),
    }

  if contract == 'nameWrapper':
    name_wrapper = get_chain_contract_address(chain_id, 'ens_name_wrapper')
    if as_owner:
      return {
        'to': name_wrapper,
        'data': encode_function_data(
          NAME_WRAPPER_ABI,
          'setRecord',
          [namehash(name), EMPTY_ADDRESS, EMPTY_ADDRESS, 0],
        ),
      }
    label, _label_hash, parent_node = make_label_node_and_parent(name)
    return {
      'to': name_wrapper,
      'data': encode_function_data(
        NAME_WRAPPER_ABI,
        'setSubnodeRecord',
        [parent_node, label, EMPTY_ADDRESS, EMPTY_ADDRESS, 0, 0, 0],
      ),
    }

  raise InvalidContractTypeError(contract, CONTRACTS)


def delete_subname(
  name: str,
  contract: str,
  as_owner: bool = False,
  chain_id: int | None = None,
  gas: int | None = None,
) -> str:
  """
  Delete a subname.

  Args:
    name: Subname to delete (e.g. 'sub.alice.eth')
    contract: 'registry' or 'nameWrapper'
    as_owner: Delete as the owner of the subname itself (nameWrapper only)

  Returns:
    Transaction hash
  """
  request = make_function_data(name, contract, as_owner, chain_id)
  return send_tx(request, chain_id, gas=gas)


delete_subname.make_function_data = make_function_data
