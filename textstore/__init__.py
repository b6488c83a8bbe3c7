from .engine import StoreEngine
from .server import Server
