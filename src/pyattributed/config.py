"""Composition configuration for pyattributed."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyattributed._constants import ENV_PREFIX
from pyattributed.composition.policy import DEFAULT_MERGE_POLICY, MergePolicy
from pyattributed.exceptions import AttributedConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _parse_policy(value: Any, variable: str) -> MergePolicy:
    normalized = str(value).strip().lower().replace("-", "_")
    try:
        return MergePolicy(normalized)
    except ValueError as err:
        choices = ", ".join(policy.value for policy in MergePolicy)
        raise AttributedConfigError(
            f"{variable} must be one of {choices}, got {value!r}",
            variable=variable,
            value=value,
        ) from err


@dataclasses.dataclass(frozen=True)
class ComposeConfig:
    """Composition configuration.

    Parameters
    ----------
    merge_policy : MergePolicy
        Rule deciding which properties of a later paragraph style override
        an earlier one. ``EXPLICIT`` (default) honours every property the
        later style carries; ``DIFFERS_FROM_DEFAULT`` only those whose value
        differs from the platform default. Policy names given as strings
        (``"differs-from-default"``) are coerced; unknown names raise
        :class:`~pyattributed.exceptions.AttributedConfigError`.
    log_skipped : bool
        Emit a DEBUG log line when a value under the paragraph style key
        cannot be merged and is skipped.
    """

    merge_policy: MergePolicy = DEFAULT_MERGE_POLICY
    log_skipped: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.merge_policy, MergePolicy):
            object.__setattr__(self, "merge_policy", _parse_policy(self.merge_policy, "merge_policy"))

    @classmethod
    def from_env(cls, **overrides: Any) -> ComposeConfig:
        """Create configuration from environment variables.

        Reads ``PYATTRIBUTED_MERGE_POLICY`` and ``PYATTRIBUTED_LOG_SKIPPED``.
        Explicit keyword arguments override environment values.

        Raises
        ------
        AttributedConfigError
            When the merge policy variable names no known policy.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        policy_var = f"{ENV_PREFIX}MERGE_POLICY"
        policy_env = env.get(policy_var)
        if policy_env is not None and "merge_policy" not in overrides:
            config_kwargs["merge_policy"] = _parse_policy(policy_env, policy_var)

        if "log_skipped" not in overrides:
            config_kwargs["log_skipped"] = _env_bool(env.get(f"{ENV_PREFIX}LOG_SKIPPED"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
