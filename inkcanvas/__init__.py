from .model import Ink, Context, Brush, Trace
from .inkml import read, write, fromstring, tostring
