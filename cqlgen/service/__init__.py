from cqlgen.service.apply import *
from cqlgen.service.render import *
