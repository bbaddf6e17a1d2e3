from loguru import logger

from hpermute.control import Control
from hpermute.heap import MAXHEAP, Heap, factorial, heap_recursive
from hpermute.hpermute import hperms, hpermute
from hpermute.lexical import (
    LexicalList, LexicalPermutation, next_permutation, prev_permutation
)

# library code stays silent unless the application opts in with
# logger.enable("hpermute")
logger.disable("hpermute")
