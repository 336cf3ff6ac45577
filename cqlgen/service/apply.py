import time

from loguru import logger

from cqlgen import data
from cqlgen.service.render import render

__all__ = ("apply",)


def apply(
    *,
    schema: data.Schema,
    session_provider: data.SessionProvider,
    drop: bool = False,
) -> None | data.Error:
    try:
        start = time.monotonic()

        statements = render(schema=schema, drop=drop)
        if isinstance(statements, data.Error):
            return statements

        with session_provider.open() as session:
            if isinstance(session, data.Error):
                return session

            for statement in statements:
                logger.info(f"Executing {statement}")
                session.execute(statement)

        execution_millis = int((time.monotonic() - start) * 1000)

        logger.info(f"Applied {len(statements)} statements in {execution_millis} ms.")

        return None
    except Exception as e:
        logger.error(f"An error occurred while applying the schema: {e!s}")

        return data.Error.new(f"An error occurred while running service.apply: {e!s}")
