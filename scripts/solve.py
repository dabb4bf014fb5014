"""Command-line front end. Evaluates an expression or prints its truth table.

Examples:
    python scripts/solve.py expression='A + B · C'
    python scripts/solve.py expression="A' · B" mode=tt format=csv
    python scripts/solve.py expression='A + B' assignment='{A: 0, B: 0}'
"""

import logging
import sys

import hydra
from omegaconf import DictConfig

from boolsolve import ExpressionSyntaxError, LimitExceeded
from boolsolve.frontends.prompt import read_expression, solve
from boolsolve.hydra_utils.utils import assignment_from_config, to_bool

logger = logging.getLogger(__name__)


@hydra.main(version_base="1.1", config_path="../conf", config_name="solve")
def main(cfg: DictConfig):
    expression = cfg.expression
    if expression is None:
        try:
            expression = read_expression(sys.stdin, out=sys.stdout)
        except EOFError as e:
            logger.error(str(e))
            sys.exit(1)

    try:
        output = solve(
            str(expression),
            mode=cfg.mode,
            assignment=assignment_from_config(cfg),
            default=to_bool(cfg.default),
            normalize=cfg.normalize,
            max_variables=cfg.max_variables,
            fmt=cfg.format,
        )
    except (ExpressionSyntaxError, LimitExceeded, ValueError) as e:
        logger.error(f"Could not solve {expression!r}: {e}")
        sys.exit(1)
    print(output)


if __name__ == "__main__":
    main()
