from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional, Tuple

from ..utils.logging import env_requests_debug
from .sorted_list_vm import DEFAULT_ITEMS, DEFAULT_RANDOM_UPPER

ENV_INITIAL_ITEMS = "NUMROWS_INITIAL_ITEMS"
ENV_RANDOM_UPPER = "NUMROWS_RANDOM_UPPER"
ENV_RANDOM_SEED = "NUMROWS_RANDOM_SEED"


@dataclass
class ListSettings:
    """Typed runtime settings for the sorted rows table."""

    initial_items: Tuple[int, ...] = DEFAULT_ITEMS
    random_upper: int = DEFAULT_RANDOM_UPPER
    random_seed: Optional[int] = None


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps table settings and validation, no I/O here."""

    def __init__(self, *, config: Optional[ListSettings] = None) -> None:
        self.config = config or ListSettings()
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def initial_items(self) -> Tuple[int, ...]:
        return self.config.initial_items

    @initial_items.setter
    def initial_items(self, value: Any) -> None:
        self.config = replace(self.config, initial_items=self._coerce_items(value))

    @property
    def random_upper(self) -> int:
        return self.config.random_upper

    @random_upper.setter
    def random_upper(self, value: Any) -> None:
        self.config = replace(self.config, random_upper=self._coerce_upper(value))

    @property
    def random_seed(self) -> Optional[int]:
        return self.config.random_seed

    @random_seed.setter
    def random_seed(self, value: Any) -> None:
        self.config = replace(self.config, random_seed=self._coerce_seed(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat settings mapping to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_flat_keys = {*ListSettings.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_flat_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {}
        if "initial_items" in payload:
            updates["initial_items"] = self._coerce_items(payload["initial_items"])
        if "random_upper" in payload:
            updates["random_upper"] = self._coerce_upper(payload["random_upper"])
        if "random_seed" in payload:
            updates["random_seed"] = self._coerce_seed(payload["random_seed"])

        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def apply_env(self, environ: Mapping[str, str]) -> None:
        """Apply ``NUMROWS_*`` overrides; empty variables are ignored."""
        payload = {}
        items = (environ.get(ENV_INITIAL_ITEMS) or "").strip()
        if items:
            payload["initial_items"] = [part for part in items.split(",") if part.strip()]
        upper = (environ.get(ENV_RANDOM_UPPER) or "").strip()
        if upper:
            payload["random_upper"] = upper
        seed = (environ.get(ENV_RANDOM_SEED) or "").strip()
        if seed:
            payload["random_seed"] = seed
        self.apply_dict(payload)

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["initial_items"] = list(self.config.initial_items)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @classmethod
    def _coerce_items(cls, value: Any) -> Tuple[int, ...]:
        if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
            raise ValueError("initial_items must be a list of integers.")
        items = tuple(cls._coerce_int("initial_items", item) for item in value)
        if any(left > right for left, right in zip(items, items[1:])):
            raise ValueError("initial_items must be sorted in non-decreasing order.")
        return items

    @classmethod
    def _coerce_upper(cls, value: Any) -> int:
        coerced = cls._coerce_int("random_upper", value)
        if coerced < 1:
            raise ValueError("random_upper must be at least 1.")
        return coerced

    @classmethod
    def _coerce_seed(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        return cls._coerce_int("random_seed", value)

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        raise ValueError(f"{name} must be an integer.")
