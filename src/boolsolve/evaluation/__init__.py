from .evaluate import evaluate
from .truth_table import TruthTable, TruthTableRow, truth_table

__all__ = ["evaluate", "truth_table", "TruthTable", "TruthTableRow"]
