import logging
from typing import Any, Dict, List, Optional

from neo4j.exceptions import DriverError, Neo4jError
from pydantic import ValidationError

from people_api.core.exceptions import DataAccessError, DataIntegrityError
from people_api.models.neo_records import NeoPersonRecord
from people_api.models.person import Person
from people_api.services.people import queries
from people_api.services.people.assembler import to_person

logger = logging.getLogger(__name__)


class PeopleCypherDriver:
    """Reads Person documents from Neo4j.

    Holds a reference to a shared, pooled neo4j driver and only ever issues
    read transactions against it. Built once at startup and handed to the
    routers through FastAPI dependencies.
    """

    def __init__(self, driver, database: Optional[str] = None):
        self._driver = driver
        self._database = database

    def _session(self):
        if self._database:
            return self._driver.session(database=self._database)
        return self._driver.session()

    def check_connectivity(self) -> None:
        """Run a trivial read; raise DataAccessError if the store can't answer it."""
        try:
            with self._session() as session:
                session.execute_read(lambda tx: tx.run(queries.CHECK_CONNECTIVITY).data())
        except (Neo4jError, DriverError, OSError) as exc:
            logger.error("Neo4j connectivity check failed: %s", exc)
            raise DataAccessError(f"Error connecting to neo4j: {exc}") from exc

    def read(self, uuid: str, trace_id: Optional[str] = None) -> Optional[Person]:
        """Look up the canonical Person for `uuid`.

        Returns None when nothing resolves. Raises DataAccessError when the
        query itself fails and DataIntegrityError when more than one canonical
        person comes back for the same identifier.
        """
        try:
            with self._session() as session:
                rows = session.execute_read(_read_person_rows, uuid)
        except (Neo4jError, DriverError, OSError) as exc:
            logger.error("Error looking up uuid %s (tid=%s): %s", uuid, trace_id, exc)
            raise DataAccessError(f"Error accessing datastore for uuid: {uuid}: {exc}") from exc

        if not rows:
            logger.debug("No person found for uuid %s (tid=%s)", uuid, trace_id)
            return None
        if len(rows) > 1:
            ids = [(r.get("person") or {}).get("id") for r in rows]
            logger.error(
                "Data integrity violation: %d canonical people %s found for uuid %s (tid=%s)",
                len(rows), ids, uuid, trace_id,
            )
            raise DataIntegrityError(f"Multiple people found with the same uuid:{uuid} !")

        try:
            record = NeoPersonRecord.model_validate(rows[0])
        except ValidationError as exc:
            logger.error("Unexpected record shape for uuid %s (tid=%s): %s", uuid, trace_id, exc)
            raise DataAccessError(f"Error decoding datastore result for uuid: {uuid}") from exc

        return to_person(record)


def _read_person_rows(tx, uuid: str) -> List[Dict[str, Any]]:
    # Canonical (concorded) model first; the direct model only when it has nothing.
    rows = tx.run(queries.READ_PERSON_CANONICAL, uuid=uuid).data()
    if rows:
        logger.debug("uuid %s resolved through the canonical path", uuid)
        return rows
    rows = tx.run(queries.READ_PERSON_DIRECT, uuid=uuid).data()
    if rows:
        logger.debug("uuid %s resolved through the direct path", uuid)
    return rows
