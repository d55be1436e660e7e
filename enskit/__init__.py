"""
enskit: Ethereum Name Service reads and writes.

Every operation is split into an encode step producing a
{'to': ..., 'data': ...} request and a decode step parsing the returned
bytes; the top-level functions here run both against a node.
"""
from enskit.functions.public import (
  DecodedAbi,
  NameResult,
  OwnerResult,
  Price,
  WrapperData,
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
from enskit.functions.write import (
  commit_name,
  create_subname,
  delete_subname,
  register_name,
  renew_name,
  set_abi_record,
  set_address_record,
  set_records,
  set_resolver,
  set_text_record,
)
from enskit.utils.encoders import EncodedAbi, encode_abi
from enskit.utils.normalise import labelhash, namehash, normalise
from enskit.utils.register_helpers import RegistrationParameters, random_secret

__version__ = '0.1.0'
