"""Member visibility rules."""

from modules.portal_groups.config import HarvestConfig
from modules.portal_groups.domain.models import Member


def is_system_account(username: str, prefix: str = "esri_") -> bool:
    """Whether a username belongs to a reserved system account."""
    return username.startswith(prefix)


def should_emit(member: Member, config: HarvestConfig) -> bool:
    """Whether a member produces an output record under this config."""
    if config.include_system_accounts:
        return True
    return not is_system_account(member.username, config.system_account_prefix)
