"""
Typed errors raised by enskit.

Every validation error is raised before any RPC request is made.
"""


class EnsError(Exception):
  """Base class for all enskit errors."""
  pass


class ConfigurationError(EnsError):
  """Raised when a required setting is empty."""

  def __init__(self, key: str):
    self.key = key
    super().__init__(f'{key} not configured in settings')


class UnsupportedChainError(EnsError):
  """Raised when no ENS deployment or RPC URL is known for a chain."""

  def __init__(self, chain_id: int, supported_chains: dict | None = None):
    self.chain_id = chain_id
    self.supported_chains = supported_chains or {}
    message = f'Unsupported chain ID: {chain_id}'
    if self.supported_chains:
      message += '. Supported: ' + ', '.join(
        f'{name} ({cid})' for cid, name in self.supported_chains.items()
      )
    super().__init__(message)


class ContractNotConfiguredError(EnsError):
  """Raised when a chain has no address for the requested contract."""

  def __init__(self, contract: str, chain_id: int):
    self.contract = contract
    self.chain_id = chain_id
    super().__init__(f'No {contract} contract for chain {chain_id}')


class UnsupportedNameTypeError(EnsError):

  def __init__(self, name_type: str, supported_name_types: list[str], details: str = ''):
    self.name_type = name_type
    self.supported_name_types = supported_name_types
    self.details = details
    message = (f'Unsupported name type: {name_type}. '
               f'Supported: {", ".join(supported_name_types)}')
    if details:
      message += f' ({details})'
    super().__init__(message)


class InvalidContractTypeError(EnsError):

  def __init__(self, contract_type: str, supported_contract_types: list[str]):
    self.contract_type = contract_type
    self.supported_contract_types = supported_contract_types
    super().__init__(f'Invalid contract type: {contract_type}. '
                     f'Supported: {", ".join(supported_contract_types)}')


class AdditionalParameterSpecifiedError(EnsError):
  """Raised when a parameter is passed that the selected contract cannot honour."""

  def __init__(self, parameter: str, allowed_parameters: list[str], details: str = ''):
    self.parameter = parameter
    self.allowed_parameters = allowed_parameters
    self.details = details
    message = (f'Additional parameter specified: {parameter}. '
               f'Allowed: {", ".join(allowed_parameters)}')
    if details:
      message += f' ({details})'
    super().__init__(message)


class WrappedLabelTooLargeError(EnsError):
  """NameWrapper labels are limited to 255 bytes."""

  def __init__(self, label: str, byte_length: int):
    self.label = label
    self.byte_length = byte_length
    super().__init__(f'Supplied label was too long: {byte_length} bytes (max 255)')


class InvalidEncodedLabelError(EnsError):

  def __init__(self, label: str):
    self.label = label
    super().__init__(f'Invalid encoded label: {label}')


class ResolverAddressRequiredError(EnsError):

  def __init__(self, details: str = ''):
    self.details = details
    super().__init__(f'Resolver address is required. {details}'.strip())


class CampaignReferenceTooLargeError(EnsError):

  def __init__(self, campaign: int):
    self.campaign = campaign
    super().__init__(f'Campaign reference {campaign} is out of range (0 to 0xffffffff)')


class UnknownContentTypeError(EnsError):

  def __init__(self, content_type):
    self.content_type = content_type
    super().__init__(f'Unknown content type: {content_type}')


class UniversalResolverError(EnsError):
  """Raised when the UniversalResolver reverts with a non-recoverable error."""

  def __init__(self, error_name: str, args: tuple = ()):
    self.error_name = error_name
    self.error_args = args
    super().__init__(f'UniversalResolver reverted with {error_name}{args if args else ""}')


class CallReverted(EnsError):
  """Raised when an eth_call reverts. `data` holds the raw revert payload."""

  def __init__(self, data: bytes, message: str = ''):
    self.data = data
    super().__init__(message or f'Call reverted with data 0x{data.hex()}')
