"""Constructor argument resolution for antoken-deployments library."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from eth_utils import is_checksum_address, is_hex_address, to_checksum_address

from .exceptions import InvalidAddressFormatError, MissingRequiredRoleError
from .types import ConstructorProfile, ContractVariant, Role

logger = logging.getLogger(__name__)

# Declared constructor role order and the argument counts each variant has
# been deployed with. Roles in a shorter form are always a leading prefix.
CONSTRUCTOR_PROFILES = {
    ContractVariant.BASIC_TOKEN: ConstructorProfile(roles=(), arities=frozenset({0})),
    ContractVariant.MULTICHAIN_TOKEN: ConstructorProfile(
        roles=(Role.RELAYER, Role.COMMISSION_RECIPIENT, Role.LIQUIDITY_PROVIDER),
        arities=frozenset({0, 2, 3}),
    ),
    ContractVariant.DATA_REGISTRY: ConstructorProfile(roles=(), arities=frozenset({0})),
    ContractVariant.BATCH_SENDER: ConstructorProfile(
        roles=(Role.COMMISSION_RECIPIENT,),
        arities=frozenset({0, 1}),
    ),
}


def validate_address(value: Any, field_name: str = "address") -> str:
    """
    Check that a value is a well-formed account address.

    Accepts 0x followed by 40 hex digits, either in a single case or with a
    valid EIP-55 checksum.

    Args:
        value: Candidate address
        field_name: Name used in the error message

    Returns:
        Checksummed address

    Raises:
        InvalidAddressFormatError: If value is not a valid address
    """
    if not isinstance(value, str) or not value.startswith("0x") or not is_hex_address(value):
        raise InvalidAddressFormatError(f"Invalid {field_name}: {value!r}")
    digits = value[2:]
    if digits != digits.lower() and digits != digits.upper() and not is_checksum_address(value):
        raise InvalidAddressFormatError(f"Invalid {field_name}: {value!r} has a bad checksum")
    return to_checksum_address(value)


def _role_from_key(key: Union[Role, str]) -> Optional[Role]:
    if isinstance(key, Role):
        return key
    try:
        return Role(key)
    except ValueError:
        return None


def resolve(
    variant: ContractVariant,
    role_values: Optional[Mapping[Union[Role, str], str]] = None,
) -> List[str]:
    """
    Resolve the ordered constructor arguments for a deployment.

    Roles outside the variant's profile are ignored. Trailing roles may be
    left out as long as the resulting argument count is one the variant
    accepts.

    Args:
        variant: Contract variant to deploy
        role_values: Mapping of role (enum or its string value) to address

    Returns:
        Checksummed addresses in constructor order (0 to 3 entries)

    Raises:
        InvalidAddressFormatError: If any supplied role value is malformed
        MissingRequiredRoleError: If a role is absent but a later role is
            supplied, or the resulting argument count is not accepted
    """
    profile = CONSTRUCTOR_PROFILES[variant]

    declared: Dict[Role, str] = {}
    for key, value in (role_values or {}).items():
        role = _role_from_key(key)
        if role is None or role not in profile.roles:
            logger.debug("Ignoring role %r: not used by %s", key, variant.value)
            continue
        declared[role] = validate_address(value, role.value)

    _warn_on_shared_addresses(declared)

    args: List[str] = []
    for index, role in enumerate(profile.roles):
        if role not in declared:
            later = [r for r in profile.roles[index + 1:] if r in declared]
            if later:
                raise MissingRequiredRoleError(
                    f"{variant.value} requires role '{role.value}' "
                    f"when '{later[0].value}' is supplied"
                )
            break
        args.append(declared[role])

    if len(args) not in profile.arities:
        missing = profile.roles[len(args)]
        raise MissingRequiredRoleError(
            f"{variant.value} cannot be deployed with {len(args)} constructor "
            f"argument(s): role '{missing.value}' is required"
        )

    return args


def _warn_on_shared_addresses(declared: Dict[Role, str]) -> None:
    seen: Dict[str, Role] = {}
    for role, address in declared.items():
        if address in seen:
            logger.warning(
                "Roles '%s' and '%s' share address %s", seen[address].value, role.value, address
            )
        else:
            seen[address] = role
