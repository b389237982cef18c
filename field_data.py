from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

# --- Data Model ---

class SelectFieldValueRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: StrictStr
    value: StrictStr


class FieldRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: StrictStr
    name: StrictStr
    value: Union[StrictStr, StrictInt]
    values: Optional[Tuple[SelectFieldValueRecord, ...]] = None


class FancyFieldTypeRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Union[StrictStr, StrictInt]
    values: Optional[Tuple[SelectFieldValueRecord, ...]] = None


class FancyFieldRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: StrictStr
    name: StrictStr
    type: FancyFieldTypeRecord


# --- Sample Data (In-Memory) ---
SAMPLE_FIELDS = [
    {
        "id": "1",
        "name": "TextField Example",
        "value": "Some value",
    },
    {
        "id": "2",
        "name": "NumberField Example",
        "value": 2,
    },
    {
        "id": "3",
        "name": "SelectField Example",
        "value": "3",
        "values": [
            {"label": "Label 1", "value": "1"},
            {"label": "Label 2", "value": "2"},
            {"label": "Label 3", "value": "3"},
        ],
    },
]


def project(fields: Iterable[FieldRecord]) -> List[FancyFieldRecord]:
    """Split each field into its identity (id, name) and a nested `type` payload.

    One output per input, in input order. The input records are not touched.
    """
    return [
        FancyFieldRecord(
            id=field.id,
            name=field.name,
            type=FancyFieldTypeRecord(value=field.value, values=field.values),
        )
        for field in fields
    ]


class FieldStore:
    """Read-only holder for the field records and their fancy projection."""

    def __init__(self, fields: Iterable[FieldRecord]):
        self._fields = tuple(fields)
        self._fancy_fields = tuple(project(self._fields))

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "FieldStore":
        # raises pydantic.ValidationError on malformed input
        return cls(FieldRecord.model_validate(record) for record in records)

    @property
    def fields(self) -> Tuple[FieldRecord, ...]:
        return self._fields

    @property
    def fancy_fields(self) -> Tuple[FancyFieldRecord, ...]:
        return self._fancy_fields

    def __len__(self) -> int:
        return len(self._fields)


def sample_store() -> FieldStore:
    return FieldStore.from_records(SAMPLE_FIELDS)
