"""File operations."""

from __future__ import annotations

from collections.abc import Sequence

from clubhouse_sdk._internal.dispatch import TEST_MULTIPART_BOUNDARY, RequestDispatcher
from clubhouse_sdk.models.params import FileUpload, UpdateFileParams
from clubhouse_sdk.models.resources import File
from clubhouse_sdk.resources._base import ResourceGroup, decode


class Files(ResourceGroup):
    """Files uploaded to Clubhouse."""

    def __init__(self, dispatcher: RequestDispatcher, *, test_mode: bool = False) -> None:
        super().__init__(dispatcher)
        self._test_mode = test_mode

    def upload(self, uploads: Sequence[FileUpload]) -> list[File]:
        """Upload files in a single multipart request.

        Each upload is sent as form field ``file0``, ``file1``, ... in order.

        Args:
            uploads: The files to upload.

        Returns:
            The created File resources.

        Raises:
            ValueError: If ``uploads`` is empty.
        """
        if not uploads:
            raise ValueError("at least one file is required")
        files =[(f"file{i}", (upload.name, upload.file)) for i, upload in enumerate(uploads)]
        # An explicit content type without a boundary lets httpx pick one.
        headers: dict[str, str] = {}
        if self._test_mode:
            headers["Content-Type"] = f"multipart/form-data; boundary={TEST_MULTIPART_BOUNDARY}"
        content = self._dispatcher.send("POST", "files", headers=headers, files=files)
        return decode(list[File], content)

    def list(self) -> list[File]:
        return self._request("GET", "files", list[File])

    def get(self, file_id: int) -> File:
        return self._request("GET", f"files/{file_id}", File)

    def update(self, file_id: int, params: UpdateFileParams) -> File:
        return self._request("PUT", f"files/{file_id}", File, params)

    def delete(self, file_id: int) -> None:
        self._delete(f"files/{file_id}")
