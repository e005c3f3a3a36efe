"""Domain errors."""


class MissingDatasetError(RuntimeError):
    """Raised when a cross-domain computation lacks a required dataset."""

    def __init__(self, dataset: str, computation: str) -> None:
        super().__init__(
            f"{computation} requires the {dataset} dataset but none was given"
        )
        self.dataset = dataset
        self.computation = computation


def require_datasets(computation: str, **datasets) -> None:
    """Raise MissingDatasetError for the first dataset that is None.

    Args:
        computation: Name of the computation, used in the message.
        **datasets: Datasets keyed by name; empty sequences are valid.

    Raises:
        MissingDatasetError: If any dataset is None.
    """
    for name, value in datasets.items():
        if value is None:
            raise MissingDatasetError(name, computation)


__all__ = ["MissingDatasetError", "require_datasets"]
