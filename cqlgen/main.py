import argparse
import pathlib
import sys
import typing

import pydantic
from loguru import logger

from cqlgen import adapter, data, service

__all__ = ("main",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class RenderArgs:
    schema: pathlib.Path
    drop: bool


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class ApplyArgs:
    schema: pathlib.Path
    cluster: str
    config: pathlib.Path | None
    drop: bool


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cqlgen", description="Generate and apply CQL schema statements.")
    parser.add_argument("--log-level", type=str, default="INFO")
    subparser = parser.add_subparsers(dest="command")

    render_parser = subparser.add_parser("render")
    apply_parser = subparser.add_parser("apply")

    render_parser.add_argument("--schema", type=str, required=True)
    render_parser.add_argument("--drop", action="store_true")

    apply_parser.add_argument("--schema", type=str, required=True)
    apply_parser.add_argument("--cluster", type=str, required=True)
    apply_parser.add_argument("--config", type=str)
    apply_parser.add_argument("--drop", action="store_true")

    return parser


def parse_args(args: argparse.Namespace, /) -> RenderArgs | ApplyArgs | data.Error:
    try:
        match args.command:
            case "render":
                if not args.schema:
                    return data.Error.new("--schema is required.")

                return RenderArgs(schema=pathlib.Path(args.schema), drop=bool(args.drop))
            case "apply":
                if not args.schema:
                    return data.Error.new("--schema is required.")

                if not args.cluster:
                    return data.Error.new("--cluster is required.")

                return ApplyArgs(
                    schema=pathlib.Path(args.schema),
                    cluster=args.cluster,
                    config=pathlib.Path(args.config) if args.config else None,
                    drop=bool(args.drop),
                )
            case None:
                return data.Error.new("A command is required: render or apply.")
            case _:
                return data.Error.new(f"{args.command} is invalid.")
    except Exception as e:
        return data.Error.new(f"An error occurred while parsing command line args: {e!s}")


def configure_logging(*, level: str) -> None | data.Error:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())

    log_folder = adapter.fs.get_log_folder()
    if isinstance(log_folder, data.Error):
        return log_folder

    logger.add(log_folder / "error.log", rotation="5 MB", retention="7 days", level="ERROR")
    return None


def run(argv: typing.Sequence[str], /) -> int:
    args = build_parser().parse_args(argv)

    logging_result = configure_logging(level=args.log_level)
    if isinstance(logging_result, data.Error):
        logger.error(f"An error occurred while setting up the log folder: {logging_result!s}")
        return 1

    parsed_args = parse_args(args)
    if isinstance(parsed_args, data.Error):
        logger.error(f"Invalid arguments: {parsed_args!s}")
        return 1

    schema = adapter.schema_file.load(schema_file=parsed_args.schema)
    if isinstance(schema, data.Error):
        logger.error(f"An error occurred while loading schema file: {schema!s}")
        return 1

    match parsed_args:
        case RenderArgs(drop=drop):
            statements = service.render(schema=schema, drop=drop)
            if isinstance(statements, data.Error):
                logger.error(f"An error occurred while rendering the schema: {statements!s}")
                return 1

            for statement in statements:
                print(statement)
        case ApplyArgs(cluster=cluster_name, config=config_override, drop=drop):
            config_file_path = adapter.fs.get_config_path(config_override)
            if isinstance(config_file_path, data.Error):
                logger.error(f"An error occurred while looking up config_file_path: {config_file_path!s}")
                return 1

            config = adapter.config.load(config_file=config_file_path)
            if isinstance(config, data.Error):
                logger.error(f"An error occurred while loading config file: {config!s}")
                return 1

            cluster_config = config.cluster(cluster_name)
            if cluster_config is None:
                logger.error(str(data.UnknownCluster(cluster_name=cluster_name)))
                return 1

            apply_result = service.apply(
                schema=schema,
                session_provider=adapter.session_provider.CassandraSessionProvider(cluster_config=cluster_config),
                drop=drop,
            )
            if isinstance(apply_result, data.Error):
                logger.error(f"An error occurred while applying the schema: {apply_result!s}")
                return 1

    return 0


def main() -> None:
    try:
        sys.exit(run(sys.argv[1:]))
    except Exception as e:
        logger.exception(f"An unexpected error occurred: {e!s}")
        sys.exit(1)


if __name__ == "__main__":
    main()
