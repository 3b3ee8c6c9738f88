"""User creation - Dependency Inversion lesson.

TaggedUserCreator is the problem shape: it picks and builds its own
database connection from a string, so every new engine means another
branch here. UserCreator is the solution: it depends on RecordStore and
receives the engine from whoever wires it.
"""
from solidkit.domain.base.consumer import Consumer
from solidkit.domain.base.exceptions import OperationFailedError
from solidkit.domain.users.record_store import RecordStore


class MySqlConnection:
    """Concrete MySQL connection, used directly by TaggedUserCreator."""

    def insert(self, record: str) -> str:
        return f"mysql:{record}"


class PostgresConnection:
    """Concrete PostgreSQL connection, used directly by TaggedUserCreator."""

    def insert(self, record: str) -> str:
        return f"postgres:{record}"


class TaggedUserCreator:
    """Creates users against a database it selects and constructs itself."""

    def __init__(self, db_type: str):
        if db_type == "mysql":
            self.connection = MySqlConnection()
        elif db_type == "postgres":
            self.connection = PostgresConnection()
        else:
            raise ValueError(f"Unsupported database type: {db_type}")

    def create(self, username: str) -> str:
        return self.connection.insert(username)


class UserCreator(Consumer):
    """Creates users through an injected RecordStore."""

    requires = RecordStore

    def __init__(self, store: RecordStore):
        super().__init__(store)

    def create(self, username: str) -> str:
        """
        Create a user record.

        Args:
            username: Name of the user to create

        Returns:
            Description of the simulated write

        Raises:
            OperationFailedError: If the username is blank or the store fails
        """
        if not username or not username.strip():
            raise OperationFailedError("create", "username must not be blank")

        effects = self._run([("save", (username.strip(),))])
        self.logger.debug(f"Created user {username.strip()}")
        return effects[0]
