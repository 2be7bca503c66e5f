"""Collection of source files and the folders containing them."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from doxyview.collection_base import CollectionBase
from doxyview.compound_base import CompoundBase
from doxyview.index_entry import IndexContext, IndexEntry
from doxyview.path_sanitizer import sanitize_hierarchical_path

if TYPE_CHECKING:
    from doxyview.compound_def import CompoundDef
    from doxyview.workspace import Workspace

logger = logging.getLogger(__name__)


def _base_name(path: str) -> str:
    return path.rstrip("/").rsplit("/", 1)[-1]


class Folder(CompoundBase):
    """A source directory, with separate lists of sub-folders and files."""

    def __init__(self, collection: FilesAndFolders, compound_def: CompoundDef) -> None:
        super().__init__(collection, compound_def)
        self.children_folder_ids = [r.refid for r in compound_def.inner_dirs if r.refid]
        self.children_file_ids = [r.refid for r in compound_def.inner_files if r.refid]
        self.children_folders: list[Folder] = []
        self.children_files: list[File] = []

        self.index_name = _base_name(self.compound_name)
        self.tree_entry_name = self.index_name
        self.nav_label = self.index_name
        self.page_title = f"The `{self.index_name}` Folder Reference"
        self.relative_path = ""


class File(CompoundBase):
    """A source file; permalink follows its folder path."""

    def __init__(self, collection: FilesAndFolders, compound_def: CompoundDef) -> None:
        super().__init__(collection, compound_def)
        self.index_name = _base_name(self.compound_name)
        self.tree_entry_name = self.index_name
        self.nav_label = self.index_name
        self.page_title = f"The `{self.index_name}` File Reference"
        self.relative_path = ""
        # Path as recorded in member locations.
        self.location_file_path = (
            compound_def.location.file if compound_def.location else self.compound_name
        )
        self.create_sections()

    def index_context(self) -> IndexContext:
        return IndexContext("file", self.relative_path)


class FilesAndFolders(CollectionBase):
    """Files and folders, linked by their inner dir/file references."""

    name = "files"
    listings = {
        "all": None,
        "files": frozenset({"file"}),
        "functions": frozenset({"function"}),
        "variables": frozenset({"variable"}),
        "typedefs": frozenset({"typedef"}),
        "enums": frozenset({"enum"}),
        "enumvalues": frozenset({"enumvalue"}),
        "defines": frozenset({"define"}),
    }

    def __init__(self, workspace: Workspace) -> None:
        super().__init__(workspace)
        self.folders_by_id: dict[str, Folder] = {}
        self.files_by_id: dict[str, File] = {}
        self.top_level_folders: list[Folder] = []
        self.top_level_files: list[File] = []

    def create_compound(self, compound_def: CompoundDef) -> CompoundBase:
        if compound_def.kind == "dir":
            folder = Folder(self, compound_def)
            self.folders_by_id[folder.id] = folder
            return folder
        file = File(self, compound_def)
        self.files_by_id[file.id] = file
        return file

    def build_hierarchy(self) -> None:
        """Link folders to sub-folders and files, then derive paths and permalinks."""
        for folder in self.folders_by_id.values():
            for child_id in folder.children_folder_ids:
                child = self.folders_by_id.get(child_id)
                if child is None:
                    logger.warning("Folder %s not a child of %s", child_id, folder.id)
                    continue
                child.parent = folder
                folder.children_folders.append(child)
                folder.children.append(child)
            for child_id in folder.children_file_ids:
                file = self.files_by_id.get(child_id)
                if file is None:
                    logger.warning("File %s not a child of %s", child_id, folder.id)
                    continue
                file.parent = folder
                folder.children_files.append(file)
                folder.children.append(file)

        self.top_level_folders = [
            f for f in self.folders_by_id.values() if f.parent is None
        ]
        self.top_level_files = [f for f in self.files_by_id.values() if f.parent is None]

        for folder in self.folders_by_id.values():
            folder.relative_path = self._relative_path(folder)
            folder.set_permalink(
                "folders", sanitize_hierarchical_path(folder.relative_path)
            )
        for file in self.files_by_id.values():
            file.relative_path = self._relative_path(file)
            file.set_permalink("files", sanitize_hierarchical_path(file.relative_path))
            self.workspace.files_by_path[file.location_file_path] = file

    def _relative_path(self, compound: CompoundBase) -> str:
        names = [compound.index_name]
        seen = {compound.id}
        parent = compound.parent
        while parent is not None and parent.id not in seen:
            names.append(parent.index_name)
            seen.add(parent.id)
            parent = parent.parent
        return "/".join(reversed(names))

    @property
    def top_level_entries(self) -> list[CompoundBase]:
        return [*self.top_level_folders, *self.top_level_files]

    def iter_index_entries(self) -> Iterator[IndexEntry]:
        for file in self.files_by_id.values():
            context = file.index_context()
            yield self.compound_entry(file, context, file.relative_path)
            yield from self.member_entries(file, context)
