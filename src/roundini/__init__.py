from .interface import Document, Section
from .deserializer import Deserializer
from .serializer import Serializer
from .args import Parameters, DanglingTextPolicy
from .chain import ChainDocumentAccessor, ChainSectionAccessor
from .files import load_from_file, save_to_file, read_all, write_all
from .exceptions_warnings import AccessError, ReadWriteError
