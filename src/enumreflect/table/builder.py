"""
Reflection Builder — Declaration to queryable reflector.

Pipeline:
1. Resolve values (explicit/implicit slots, range check)
2. Tokenize names from the raw declaration text (unless given)
3. Align both into an immutable table

Construction is all-or-nothing: any failure raises and nothing is returned.
"""

import time

from enumreflect.errors import ReflectionError
from enumreflect.observability import LogContext, MetricsRegistry, get_logger, get_metrics
from enumreflect.parsing import NameTokenizer
from enumreflect.schemas import EnumDeclaration
from enumreflect.table.reflector import EnumReflector
from enumreflect.table.table import ReflectionTable, build_table

logger = get_logger("builder")


class ReflectionBuilder:
    """
    Builds reflection tables from declarations.

    Holds no per-build state; one builder serves every registry entry.
    """

    def __init__(
        self,
        tokenizer: NameTokenizer | None = None,
        metrics: MetricsRegistry | None = None,
    ):
        self.tokenizer = tokenizer or NameTokenizer()
        self.metrics = metrics or get_metrics()

    def build_table(self, declaration: EnumDeclaration) -> ReflectionTable:
        """
        Run the full pipeline for one declaration.

        Raises:
            StructuralMismatchError: Names and values do not line up
            DuplicateNameError: Two enumerators share a name
            ValueOutOfRangeError: A value does not fit the underlying type
        """
        with LogContext(declaration.type_name):
            logger.debug("Building reflection table (%d slots)", declaration.count)
            started = time.perf_counter()

            try:
                values = declaration.resolved_values()
                if declaration.names is not None:
                    names = list(declaration.names)
                else:
                    names = self.tokenizer.tokenize(declaration.raw_text, len(values))
                table = build_table(
                    declaration.type_name,
                    values,
                    names,
                    underlying=declaration.underlying,
                )
            except ReflectionError as e:
                self.metrics.build_failures.inc()
                logger.warning("Rejected declaration: %s", e)
                raise

            self.metrics.tables_built.inc()
            self.metrics.build_duration_seconds.observe(time.perf_counter() - started)
            logger.info("Built reflection table with %d enumerators", table.count)
            return table

    def build(self, declaration: EnumDeclaration) -> EnumReflector:
        """Build a table and wrap it in a query facade."""
        return EnumReflector(self.build_table(declaration))


def create_builder(
    tokenizer: NameTokenizer | None = None,
    metrics: MetricsRegistry | None = None,
) -> ReflectionBuilder:
    """Factory for reflection builder."""
    return ReflectionBuilder(tokenizer=tokenizer, metrics=metrics)
