"""
Module: villa_kernel.selectors.base
Responsibility: Abstract base class for the read-only selectors that back the
    typed repositories.
Architecture position: Kernel > Selectors.  May import from db/, models/ and
    domain/.  MUST NOT import from villa_engines or villa_modules.

Invariants enforced:
    - Read-only access: selectors never add, delete, flush or commit.
    - Record return convention: selectors return frozen domain records, not
      ORM instances.
    - Session ownership: the caller owns the session and its transaction.

Failure modes:
    - Any SQLAlchemyError raised while querying is logged and re-raised as
      CollaboratorQueryError (chained), never swallowed or retried.
"""

from abc import ABC
from collections.abc import Callable
from typing import ClassVar, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from villa_kernel.db.base import Base
from villa_kernel.exceptions import CollaboratorQueryError
from villa_kernel.logging_config import get_logger

ModelType = TypeVar("ModelType", bound=Base)
ResultType = TypeVar("ResultType")

logger = get_logger("selectors")


class BaseSelector(ABC, Generic[ModelType]):
    """
    Abstract base class for all selectors.

    Contract:
        Selectors accept a Session from the caller, perform read-only
        queries, and return domain records.
    """

    store_name: ClassVar[str] = "unknown"

    def __init__(self, session: Session):
        self.session = session

    def _run(self, operation: str, query: Callable[[], ResultType]) -> ResultType:
        """Execute ``query``, translating store failures."""
        try:
            return query()
        except SQLAlchemyError as exc:
            logger.error(
                "collaborator_query_failed",
                extra={"store": self.store_name, "operation": operation},
                exc_info=True,
            )
            raise CollaboratorQueryError(self.store_name, str(exc)) from exc
