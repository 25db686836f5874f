from typing import List

from Workspace_Sync.core.models import FileRecord, WriteOptions


PUBLIC_KEY_NAME = "id_rsa.pub"
PRIVATE_KEY_NAME = "id_rsa"


def key_pair_files(public_key: str, private_key: str) -> List[FileRecord]:
    """
    SSH key pair as a file-set. The private key is only readable by its owner.
    """
    return [
        FileRecord(
            name=PUBLIC_KEY_NAME,
            data=public_key.encode("utf-8"),
            options=WriteOptions(mode=0o644),
        ),
        FileRecord(
            name=PRIVATE_KEY_NAME,
            data=private_key.encode("utf-8"),
            options=WriteOptions(mode=0o600),
        ),
    ]
