import logging
import os
from typing import Annotated, List, Mapping, Optional, Tuple, Union

import strawberry
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from field_data import (
    FancyFieldRecord,
    FancyFieldTypeRecord,
    FieldRecord,
    FieldStore,
    SelectFieldValueRecord,
    sample_store,
)
from field_resolvers import resolve_fancy_type, resolve_field_type

logger = logging.getLogger(__name__)

# --- Configuration ---

ENV_VARS = {
    "host": "LISTEN_ADDR",
    "port": "LISTEN_PORT",
    "graphql_path": "GRAPHQL_PATH",
    "graphiql": "GRAPHIQL",
    "log_level": "LOG_LEVEL",
}


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 4000
    graphql_path: str = "/graphql"
    graphiql: bool = True
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        if environ is None:
            environ = os.environ
        return cls(**{
            field: environ[var] for field, var in ENV_VARS.items() if var in environ
        })


# --- Schema Definition ---

@strawberry.type
class SelectFieldValue:
    label: Optional[str]
    value: Optional[str]


# Interface with implementations keeps the queries obvious.
@strawberry.interface
class Field:
    id: Optional[str]
    name: Optional[str]


@strawberry.type
class TextField(Field):
    value: Optional[str]


@strawberry.type
class NumberField(Field):
    value: Optional[int]


@strawberry.type
class SelectField(Field):
    value: Optional[str]
    values: Optional[List[Optional[SelectFieldValue]]]


FieldUnion = Annotated[
    Union[TextField, NumberField, SelectField], strawberry.union("FieldUnion")
]


# Fancy composition: identity on the outside, the variant nested under `type`.
@strawberry.type
class FancyFieldTextType:
    value: Optional[str]


@strawberry.type
class FancyFieldNumberType:
    value: Optional[int]


@strawberry.type
class FancyFieldSelectType:
    value: Optional[str]
    values: Optional[List[Optional[SelectFieldValue]]]


FancyFieldTypeUnion = Annotated[
    Union[FancyFieldTextType, FancyFieldNumberType, FancyFieldSelectType],
    strawberry.union("FancyFieldTypeUnion"),
]


@strawberry.type
class FancyField:
    id: Optional[str]
    name: Optional[str]
    type: Optional[FancyFieldTypeUnion]


# --- Record -> GraphQL object ---

def to_select_values(
    values: Optional[Tuple[SelectFieldValueRecord, ...]]
) -> Optional[List[SelectFieldValue]]:
    if values is None:
        return None
    return [SelectFieldValue(label=v.label, value=v.value) for v in values]


def to_field(record: FieldRecord) -> Optional[Field]:
    """Build the concrete `Field` implementation the record's shape resolves to."""
    type_name = resolve_field_type(record)

    if type_name == "TextField":
        return TextField(id=record.id, name=record.name, value=record.value)
    if type_name == "NumberField":
        return NumberField(id=record.id, name=record.name, value=record.value)
    if type_name == "SelectField":
        return SelectField(
            id=record.id,
            name=record.name,
            value=record.value,
            values=to_select_values(record.values),
        )

    logger.warning("No field type matches record %r", record.id)
    return None


def to_fancy_type(record: FancyFieldTypeRecord) -> Optional[FancyFieldTypeUnion]:
    type_name = resolve_fancy_type(record)

    if type_name == "FancyFieldTextType":
        return FancyFieldTextType(value=record.value)
    if type_name == "FancyFieldNumberType":
        return FancyFieldNumberType(value=record.value)
    if type_name == "FancyFieldSelectType":
        return FancyFieldSelectType(
            value=record.value, values=to_select_values(record.values)
        )

    logger.warning("No fancy field type matches value %r", record.value)
    return None


def to_fancy_field(record: FancyFieldRecord) -> FancyField:
    return FancyField(id=record.id, name=record.name, type=to_fancy_type(record.type))


# --- Query Definition ---

def _store(info: Info) -> FieldStore:
    return info.context["store"]


@strawberry.type
class Query:
    @strawberry.field
    def fields(self, info: Info) -> List[Field]:
        return [to_field(record) for record in _store(info).fields]

    @strawberry.field
    def fields_with_union(self, info: Info) -> List[FieldUnion]:
        return [to_field(record) for record in _store(info).fields]

    @strawberry.field
    def fancy_fields(self, info: Info) -> List[FancyField]:
        return [to_fancy_field(record) for record in _store(info).fancy_fields]


schema = strawberry.Schema(query=Query, types=[TextField, NumberField, SelectField])


# --- App Setup ---

def create_app(
    settings: Optional[Settings] = None, store: Optional[FieldStore] = None
) -> FastAPI:
    if settings is None:
        settings = Settings()
    if store is None:
        store = sample_store()

    async def get_context():
        return {"store": store}

    graphql_app = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )

    app = FastAPI(title="GraphQL Fields Demo")
    app.include_router(graphql_app, prefix=settings.graphql_path)

    @app.get("/schema", response_class=PlainTextResponse)
    def get_schema():
        return str(schema)

    logger.info("Serving %d fields at %s", len(store), settings.graphql_path)
    return app


app = create_app(Settings.from_env())


def main() -> None:
    import uvicorn

    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level.upper())

    print(f"\n🚀 Server ready at http://localhost:{settings.port}{settings.graphql_path}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
