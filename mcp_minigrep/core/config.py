"""
Case policy resolution

Decides between case-sensitive and case-insensitive search from an optional
explicit override and the IGNORE_CASE environment signal. When both are
present the explicit override wins.
"""
import logging
from typing import Optional

from .domain import CasePolicy, SearchConfig
from .ports import EnvironmentLookup

logger = logging.getLogger(__name__)

IGNORE_CASE_VAR = "IGNORE_CASE"


def resolve_case_policy(
    explicit_override: Optional[bool],
    environment_signal_present: bool
) -> CasePolicy:
    """
    Pick the case policy for one invocation.

    Args:
        explicit_override: None when the caller expressed no preference,
            otherwise True (ignore case) or False (match case)
        environment_signal_present: whether the environment variable is set

    Returns:
        The override's policy if given, else INSENSITIVE iff the signal is present
    """
    if explicit_override is not None:
        return CasePolicy.from_ignore_case(explicit_override)
    return CasePolicy.from_ignore_case(environment_signal_present)


class ConfigResolver:
    """Resolves case policy against an injected environment lookup"""

    def __init__(self, environment: EnvironmentLookup, variable: str = IGNORE_CASE_VAR):
        self.environment = environment
        self.variable = variable

    def resolve(self, explicit_override: Optional[bool] = None) -> CasePolicy:
        """Resolve the policy, reading the environment exactly once"""
        signal = self.environment.is_set(self.variable)
        policy = resolve_case_policy(explicit_override, signal)
        logger.debug("%s set=%s override=%s -> %s",
                     self.variable, signal, explicit_override, policy.value)
        return policy

    def build(
        self,
        query: str,
        file_path: Optional[str],
        explicit_override: Optional[bool] = None
    ) -> SearchConfig:
        """Build a SearchConfig with the policy resolved"""
        return SearchConfig(
            query=query,
            file_path=file_path,
            policy=self.resolve(explicit_override)
        )
