"""Git command builders.

Each submodule mirrors one git subcommand (or a family of them) and
exposes plain functions returning GitCommand values:

    from tusk.command import branch, ls_tree

    branch.lists(all=True)          # git branch -v --no-color --no-abbrev -a
    ls_tree.tree("main", "src/")    # git ls-tree -l main -- src/
"""

from . import (
    branch,
    cat_file,
    diff,
    log,
    ls_tree,
    main,
    remote,
    rev_list,
    rev_parse,
    show,
    sync,
    tag,
)
from .base import GitCommand, check_name, check_ref

__all__ = [
    "GitCommand",
    "check_name",
    "check_ref",
    "branch",
    "cat_file",
    "diff",
    "log",
    "ls_tree",
    "main",
    "remote",
    "rev_list",
    "rev_parse",
    "show",
    "sync",
    "tag",
]
