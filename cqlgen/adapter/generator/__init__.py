from cqlgen.adapter.generator.index import *
from cqlgen.adapter.generator.keyspace import *
from cqlgen.adapter.generator.strategy import *
from cqlgen.adapter.generator.table import *
