from cqlgen.data import error
from cqlgen.data.builder import *
from cqlgen.data.cluster_config import *
from cqlgen.data.column import *
from cqlgen.data.config import *
from cqlgen.data.data_type import *
from cqlgen.data.error import *
from cqlgen.data.index_spec import *
from cqlgen.data.key_type import *
from cqlgen.data.keyspace_spec import *
from cqlgen.data.option import *
from cqlgen.data.schema import *
from cqlgen.data.session_provider import *
from cqlgen.data.table_spec import *
