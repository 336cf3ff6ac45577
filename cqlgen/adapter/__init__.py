from cqlgen.adapter import config, cql, fs, generator, options, schema_file, session_provider, type_parser
