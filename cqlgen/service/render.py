from loguru import logger

from cqlgen import adapter, data

__all__ = ("render",)


def render(*, schema: data.Schema, drop: bool = False) -> tuple[str, ...] | data.Error:
    try:
        if drop:
            specs = _drop_specs(schema)
            if isinstance(specs, data.Error):
                return specs
        else:
            specs = _create_specs(schema)

        statements = tuple(adapter.generator.cql(spec) for spec in specs)

        logger.debug(f"Rendered {len(statements)} statements.")

        return statements
    except data.CqlGenError as e:
        logger.error(f"The schema is invalid: {e!s}")

        return data.Error.new(f"The schema is invalid: {e!s}")
    except Exception as e:
        logger.error(f"An error occurred while rendering the schema: {e!s}")

        return data.Error.new(f"An error occurred while running service.render: {e!s}")


def _create_specs(schema: data.Schema, /) -> list[adapter.generator.Spec]:
    specs: list[adapter.generator.Spec] = []
    if schema.keyspace is not None:
        specs.append(schema.keyspace)
    specs.extend(schema.tables)
    specs.extend(schema.indexes)
    return specs


def _drop_specs(schema: data.Schema, /) -> list[adapter.generator.Spec] | data.Error:
    specs: list[adapter.generator.Spec] = []
    for index in reversed(schema.indexes):
        if not index.name:
            return data.Error.new(
                f"The index on {index.table}.{index.column} has no name, so it cannot be dropped."
            )
        specs.append(data.DropIndexSpec(name=index.name, keyspace=index.keyspace, if_exists=True))

    for table in reversed(schema.tables):
        specs.append(data.DropTableSpec(name=table.name, keyspace=table.keyspace, if_exists=True))

    if schema.keyspace is not None:
        specs.append(data.DropKeyspaceSpec(name=schema.keyspace.name, if_exists=True))

    return specs
