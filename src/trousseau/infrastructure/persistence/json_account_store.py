"""
JSON file account store.

Writes account records as a JSON array of
``{"publicKey": <base58>, "secretKey": <codec output>}`` objects.
Writes go to a temp file in the target directory and are moved into place
with os.replace, so readers never observe a partial document.
"""

import contextlib
import json
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from trousseau.domain.exceptions import PersistenceError
from trousseau.domain.services.i_account_store import IAccountStore
from trousseau.domain.services.i_secret_key_codec import ISecretKeyCodec
from trousseau.domain.value_objects.account_keypair import (
    AccountKeypair,
    AccountRecord,
)
from trousseau.infrastructure.crypto.plain_secret_key_codec import (
    PlainSecretKeyCodec,
)


class JsonAccountStore(IAccountStore):
    """Account record persisted to a single JSON file."""

    def __init__(
        self,
        path: Union[str, Path],
        codec: Optional[ISecretKeyCodec] = None,
    ):
        """
        Initialize store.

        Args:
            path: Target JSON file (``~`` is expanded)
            codec: Secret key codec (default: plain byte array)
        """
        self.path = Path(path).expanduser()
        self.codec = codec or PlainSecretKeyCodec()

    # ================================================================
    # Serialization
    # ================================================================

    def to_document(self, record: AccountRecord) -> List[dict]:
        """Convert record to JSON-compatible list of entries."""
        return [
            {
                "publicKey": account.public_key,
                "secretKey": self.codec.encode(account.secret_key),
            }
            for account in record
        ]

    def from_document(self, document: object) -> AccountRecord:
        """
        Build record from parsed JSON.

        Raises:
            PersistenceError: If document does not match the account format
        """
        if not isinstance(document, list):
            raise PersistenceError(
                f"Account file {self.path} must contain a JSON array",
                details={"path": str(self.path)},
            )

        accounts = []
        for index, entry in enumerate(document):
            try:
                if not isinstance(entry, dict):
                    raise ValueError("entry must be a JSON object")
                accounts.append(
                    AccountKeypair(
                        public_key=entry["publicKey"],
                        secret_key=self.codec.decode(entry["secretKey"]),
                    )
                )
            except KeyError as e:
                raise PersistenceError(
                    f"Account entry #{index} is missing field {e}",
                    details={"path": str(self.path), "index": index},
                ) from e
            except (TypeError, ValueError) as e:
                raise PersistenceError(
                    f"Account entry #{index} is malformed: {e}",
                    details={"path": str(self.path), "index": index},
                ) from e

        return AccountRecord.from_accounts(accounts)

    # ================================================================
    # IAccountStore
    # ================================================================

    def save(self, record: AccountRecord) -> None:
        """
        Write record atomically, replacing previous content.

        Raises:
            PersistenceError: If the write cannot complete. No partial
                target file and no temp file remain.
        """
        content = json.dumps(self.to_document(record), indent=2)
        tmp_path: Optional[str] = None

        try:
            # NamedTemporaryFile creates the file with mode 0600
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = tmp.name
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())

            os.replace(tmp_path, self.path)

        except OSError as e:
            if tmp_path is not None:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(tmp_path)
            raise PersistenceError(
                f"Failed to write account file {self.path}: {e}",
                details={"path": str(self.path), "accounts": len(record)},
            ) from e

    def load(self) -> AccountRecord:
        """Read record back from disk."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceError(
                f"Failed to read account file {self.path}: {e}",
                details={"path": str(self.path)},
            ) from e

        try:
            document = json.loads(text)
        except ValueError as e:
            raise PersistenceError(
                f"Account file {self.path} is not valid JSON: {e}",
                details={"path": str(self.path)},
            ) from e

        return self.from_document(document)
