from dataclasses import dataclass, replace

from .models import Transaction


EDITABLE_FIELDS = ("name", "description", "date_time")


@dataclass(frozen=True)
class ViewState:
    """Everything the page shows: the editable form fields and the loaded list."""

    name: str = ""
    description: str = ""
    date_time: str = ""
    transactions: tuple[Transaction, ...] = ()

    def missing_fields(self) -> list[str]:
        return [field for field in EDITABLE_FIELDS if not getattr(self, field)]


def set_field(state: ViewState, field: str, value: str) -> ViewState:
    if field not in EDITABLE_FIELDS:
        raise ValueError(f"unknown field: {field}")
    return replace(state, **{field: value})


def load_complete(state: ViewState, transactions) -> ViewState:
    return replace(state, transactions=tuple(transactions))


def submit_complete(state: ViewState) -> ViewState:
    # The new record only shows up after the next load.
    return replace(state, name="", description="", date_time="")
