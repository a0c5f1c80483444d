# costbasis/config.py
"""Ledger configurations (action vocabulary + precision) and logging setup."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from costbasis.errors import InvalidInput

# Log level for the app entry point, e.g. DEBUG to trace every lot
LOG_LEVEL = os.getenv("COSTBASIS_LOG_LEVEL", "WARNING")


@dataclass(frozen=True)
class AcquisitionRule:
    """An action that opens a new lot."""
    action: str
    case_insensitive: bool = False

    def matches(self, action: str) -> bool:
        if action == self.action:
            return True
        return self.case_insensitive and action.upper() == self.action.upper()


@dataclass(frozen=True)
class LedgerConfig:
    """Everything that differs between the equity and crypto ledgers."""
    name: str
    acquisitions: Tuple[AcquisitionRule, ...]
    precision: int
    disposal_action: str = "Sell"
    description: str = field(default="", compare=False)

    def __post_init__(self):
        if not self.acquisitions:
            raise InvalidInput(f"Config {self.name!r} has no acquisition actions")
        if not self.disposal_action:
            raise InvalidInput(f"Config {self.name!r} has an empty disposal action")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 0:
            raise InvalidInput(f"Config {self.name!r} precision must be a non-negative int, got {self.precision!r}")

    def is_acquisition(self, action: str) -> bool:
        return any(rule.matches(action) for rule in self.acquisitions)

    def is_disposal(self, action: str) -> bool:
        # Case-sensitive on purpose: "sell" is not a disposal
        return action == self.disposal_action

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "precision": self.precision,
            "disposal_action": self.disposal_action,
            "acquisitions": [
                {"action": rule.action, "case_insensitive": rule.case_insensitive}
                for rule in self.acquisitions
            ],
        }

    @staticmethod
    def from_dict(payload: Dict[str, Any]) -> "LedgerConfig":
        rules = []
        for item in payload.get("acquisitions") or []:
            if isinstance(item, str):
                rules.append(AcquisitionRule(action=item))
            elif isinstance(item, dict) and item.get("action"):
                rules.append(
                    AcquisitionRule(
                        action=str(item["action"]),
                        case_insensitive=bool(item.get("case_insensitive", False)),
                    )
                )
            else:
                raise InvalidInput(f"Bad acquisition entry: {item!r}")
        return LedgerConfig(
            name=str(payload.get("name", "custom")),
            acquisitions=tuple(rules),
            precision=payload.get("precision", 5),
            disposal_action=str(payload.get("disposal_action", "Sell")),
            description=str(payload.get("description", "")),
        )


EQUITY = LedgerConfig(
    name="equity",
    description="Stocks and ETFs, dividends reinvested as DRIP",
    acquisitions=(
        AcquisitionRule("Buy"),
        AcquisitionRule("DRIP", case_insensitive=True),
    ),
    precision=5,
)

CRYPTO = LedgerConfig(
    name="crypto",
    description="Coins and tokens, staking income booked as REWARD",
    acquisitions=(
        AcquisitionRule("Buy"),
        AcquisitionRule("DRIP", case_insensitive=True),
        AcquisitionRule("REWARD", case_insensitive=True),
    ),
    precision=8,
)

PRESETS: Dict[str, LedgerConfig] = {EQUITY.name: EQUITY, CRYPTO.name: CRYPTO}


def get_config(name: str) -> LedgerConfig:
    """Look up a preset ledger configuration by name."""
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise InvalidInput(f"Unknown ledger config {name!r}; expected one of {sorted(PRESETS)}") from None


def parse_config(text: str) -> LedgerConfig:
    """Build a ledger configuration from YAML text."""
    try:
        payload = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise InvalidInput(f"Ledger config is not valid YAML: {e}") from e
    if not isinstance(payload, dict):
        raise InvalidInput("Ledger config YAML must be a mapping")
    return LedgerConfig.from_dict(payload)


def load_config(path: Union[str, Path]) -> LedgerConfig:
    """Load a custom ledger configuration from YAML."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        return parse_config(handle.read())


def save_config(config: LedgerConfig, path: Union[str, Path]) -> None:
    """Persist a ledger configuration to YAML."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(config.to_dict(), handle, sort_keys=False)


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic log handler (app entry point only)."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
