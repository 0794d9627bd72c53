# What it does: Records the outcome of each program comparison and aggregates them into a run summary
# What data structure it uses: List (of per-program results, kept in processing order), Tuples (for read and write error records)

class ProgramResult:
    # Outcome of comparing one program's old and new files

    def __init__(self, program):
        self.program = program
        self.added = 0
        self.removed = 0
        self.unchanged = 0
        self.read_errors = []   # (side, path, message)
        self.write_errors = []  # (path, message)

    @property
    def ok(self):
        return not self.write_errors

    def __repr__(self):
        return (f"ProgramResult({self.program!r}, added={self.added}, removed={self.removed}, "
                f"unchanged={self.unchanged}, ok={self.ok})")


class RunSummary:
    # Aggregated counts over every program processed in one run

    def __init__(self):
        self.results = []

    def add(self, result):
        self.results.append(result)

    @property
    def programs(self):
        return [result.program for result in self.results]

    @property
    def succeeded(self):
        return sum(1 for result in self.results if result.ok)

    @property
    def failed(self):
        return sum(1 for result in self.results if not result.ok)

    @property
    def read_errors(self):
        return sum(len(result.read_errors) for result in self.results)

    @property
    def total_added(self):
        return sum(result.added for result in self.results)

    @property
    def total_removed(self):
        return sum(result.removed for result in self.results)

    @property
    def total_unchanged(self):
        return sum(result.unchanged for result in self.results)

    def format(self): # Returns a one-line, user-facing description of the run
        return (f"{len(self.results)} program(s) compared: {self.succeeded} succeeded, {self.failed} failed, "
                f"{self.read_errors} unreadable file(s) | Added: {self.total_added} | "
                f"Removed: {self.total_removed} | Unchanged: {self.total_unchanged}")
