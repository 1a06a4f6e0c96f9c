from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from backupbuddy.config import RunConfiguration
from backupbuddy.globals import Globals


@dataclass(frozen=True)
class TriggerContext:
    """
    Runtime values of the trigger currently being processed.

    Attributes:
        trigger_name (str): The trimmed trigger token.
        timestamp (str): Start time of the trigger, formatted as `YYYY.MM.DD.HH.MM.SS`.
        trigger_data_dir (Path): `data_root / trigger_name`.
    """
    trigger_name: str
    timestamp: str
    trigger_data_dir: Path


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(Globals.TIMESTAMP_FORMAT)


def create_trigger_context(run_config: RunConfiguration, trigger_name: str, now: Optional[datetime] = None) -> TriggerContext:
    moment = now if now is not None else datetime.now()
    return TriggerContext(
        trigger_name=trigger_name,
        timestamp=format_timestamp(moment),
        trigger_data_dir=run_config.data_root / trigger_name,
    )
