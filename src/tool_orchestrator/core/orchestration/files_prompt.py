"""Annotate messages with the files attached to them so tools can reference the files."""

from typing import List, Sequence, TypeVar

from ..messages.models import BaseMessage, MessageFile

M = TypeVar("M", bound=BaseMessage)


def make_files_prompt(files: Sequence[MessageFile], file_message_index: int) -> str:
    """Describe the files of one message.

    Args:
        files: Files attached to the message.
        file_message_index: Position of the message in the conversation. Together with the
            file index it identifies a file for file-reading tools.

    Returns:
        The note appended to the message content.
    """
    if not files:
        return "The user has not uploaded any files. Do not attempt to use any tools that require files"

    stringified_files = "\n".join(
        f"  - fileMessageIndex {file_message_index} | fileIndex {file_index} | {file.name} ({file.mime})"
        for file_index, file in enumerate(files)
    )
    return f"Attached {len(files)} file{'' if len(files) == 1 else 's'}:\n{stringified_files}"


def with_files_prompt(messages: Sequence[M]) -> List[M]:
    """Return copies of ``messages`` whose content lists their attached files.

    Messages without files are returned unchanged.
    """
    annotated: List[M] = []
    for index, message in enumerate(messages):
        if not message.files:
            annotated.append(message)
            continue
        content = f"{message.content}\n{make_files_prompt(message.files, index)}"
        annotated.append(message.model_copy(update={"content": content}))
    return annotated
