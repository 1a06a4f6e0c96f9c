from backupbuddy.globals import Globals


class JobRegistry:
    """
    Bookkeeping the resolver fills while it reads a config source.

    Every job definition that is read registers itself here, the last one
    becomes `current`, and a config-level `extension` replaces the default.
    The engine hands a fresh registry to every trigger and resets it afterwards
    so nothing read for one trigger is visible to the next.
    """

    def __init__(self):
        self.jobs = []
        self.current = None
        self.extension = Globals.DEFAULT_EXTENSION

    def register(self, job):
        self.jobs.append(job)
        self.current = job

    def reset_all(self):
        self.jobs = []
        self.current = None
        self.extension = Globals.DEFAULT_EXTENSION

    def is_pristine(self) -> bool:
        return not self.jobs and self.current is None and self.extension == Globals.DEFAULT_EXTENSION

    def __repr__(self) -> str:
        return f"JobRegistry(jobs={len(self.jobs)}, current={self.current!r}, extension={self.extension!r})"
