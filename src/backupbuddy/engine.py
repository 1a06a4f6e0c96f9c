from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from backupbuddy.config import RunConfiguration, create_dir
from backupbuddy.context import create_trigger_context
from backupbuddy.errors import BackupBuddyError
from backupbuddy.log import logger
from backupbuddy.registry import JobRegistry
from backupbuddy.resolver import JobResolver


@dataclass
class TriggerResult:
    """Outcome of one trigger. `label` is None if the trigger could not be resolved."""
    trigger: str
    success: bool
    label: Optional[str] = None
    error: Optional[str] = None


def split_triggers(raw_triggers: str) -> List[str]:
    """
    Split the comma-separated trigger argument and trim every token.

    Order and duplicates are preserved. Blank tokens are kept as well and
    fail later at resolution, so a typo like "a,,b" is reported instead of
    silently ignored.
    """
    return [token.strip() for token in raw_triggers.split(",")]


def run_triggers(
    raw_triggers: str,
    run_config: RunConfiguration,
    resolver: JobResolver,
    registry_factory: Callable[[], JobRegistry] = JobRegistry,
    clock: Callable[[], datetime] = datetime.now,
) -> List[TriggerResult]:
    """
    Resolve and perform every trigger, one after the other.

    A failing trigger is logged and recorded, the remaining triggers still run.
    After each trigger the job registry is reset and the trigger context is
    dropped, regardless of the outcome.

    Parameters:
        raw_triggers (str): Comma-separated trigger names.
        run_config (RunConfiguration): Paths for this run.
        resolver (JobResolver): Maps a trigger name to a job.
        registry_factory (callable): Creates the registry handed to the resolver.
        clock (callable): Source of the per-trigger timestamp.

    Returns:
        list[TriggerResult]: One result per trigger, in input order.
    """
    results = []

    for trigger_name in split_triggers(raw_triggers):
        context = None
        registry = registry_factory()
        result = TriggerResult(trigger=trigger_name, success=False)

        try:
            context = create_trigger_context(run_config, trigger_name, clock())
            create_dir(context.trigger_data_dir)

            job = resolver.resolve(trigger_name, run_config.config_source, registry)
            result.label = job.label

            logger.info(f"Performing backup for \"{job.label}\" (trigger \"{trigger_name}\", {context.timestamp})")
            job.perform(context, run_config)
            result.success = True

        except (BackupBuddyError, OSError) as e:
            result.error = str(e)
            logger.error(f"Trigger \"{trigger_name}\" failed: {e}")

        except Exception as e:
            result.error = f"{type(e).__name__}: {e}"
            logger.error(f"Unexpected error in trigger \"{trigger_name}\": {result.error}")

        finally:
            registry.reset_all()
            context = None

        results.append(result)

    num_errors = sum(1 for result in results if not result.success)
    logger.debug(f"Processed {len(results)} trigger(s), {num_errors} failed.")

    return results
