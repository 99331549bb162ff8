class ImportPipelineError(Exception):
    pass


class UnbalancedQuoteError(ImportPipelineError):
    def __init__(self, line: str):
        super().__init__(f"Unbalanced quote in line: {line!r}")
        self.line = line


class ConversionError(ImportPipelineError):
    pass


class BulkSubmissionError(ImportPipelineError):
    def __init__(self, outcome):
        failed = outcome.failed
        super().__init__(f"{len(failed)} of {len(outcome.results)} {outcome.entity} rows failed to submit")
        self.outcome = outcome
