"""Git repository facade.

Repository wraps one working tree (or bare repository) and exposes git
operations as methods returning Result values with typed records.

Usage:
    repo = Repository(Path("/path/to/repo"))

    match repo.get_commit("HEAD"):
        case Ok(commit):
            print(f"{commit.short_sha()} {commit.message.short}")
        case Err(e):
            print(f"Error: {e.message}")

    match repo.get_tree("main", "src"):
        case Ok(tree):
            for node in tree:
                print(node.full_path, node.size)
        case Err(e):
            print(f"Error: {e.message}")

Methods taking references raise ValueError for references git would read
as options (see tusk.command.base.check_ref).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from tusk.command import (
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
from tusk.core.config import Config
from tusk.core.result import Err, Ok, Result
from tusk.objects.branch import Branch, parse_branch_name
from tusk.objects.commit import Commit
from tusk.objects.diff import Diff, parse_diff
from tusk.objects.log import Log
from tusk.objects.remote import Remote, parse_remotes
from tusk.objects.status import GitStatus, parse_status
from tusk.objects.tag import Tag, parse_show_ref
from tusk.objects.tree import Tree, TreeObject

from .caller import GitCaller, GitError, output_lines

if TYPE_CHECKING:
    from tusk.output.console import ConsoleProtocol

__all__ = ["Repository"]

_NO_TAGS_MARKERS = ("No names found", "No tags can describe", "cannot describe")


class Repository:
    """Git repository facade.

    Attributes:
        path: Repository root
        config: Effective configuration
        caller: Command runner bound to path
    """

    def __init__(
        self,
        path: Path,
        config: Config | None = None,
        console: ConsoleProtocol | None = None,
        verbose: bool = False,
    ) -> None:
        """Initialize repository.

        Args:
            path: Repository root (containing .git, or a bare repository)
            config: Configuration, defaults if None
            console: Receives a trace of every command when verbose
            verbose: Echo commands to console
        """
        self.path = path
        self.config = config or Config()
        self.caller = GitCaller(path, self.config.git, console=console, verbose=verbose)

    def __repr__(self) -> str:
        return f"Repository({str(self.path)!r})"

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    @classmethod
    def init(
        cls,
        path: Path,
        bare: bool = False,
        config: Config | None = None,
        console: ConsoleProtocol | None = None,
        verbose: bool = False,
    ) -> Result[Repository, GitError]:
        """Create (or reinitialize) a repository at path, creating directories."""
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(GitError(command="init", message=str(e), returncode=-1))

        repo = cls(path, config=config, console=console, verbose=verbose)
        return repo.caller.execute(main.init(bare)).map(lambda _: repo)

    @classmethod
    def clone(
        cls,
        url: str,
        parent: Path,
        directory: str | None = None,
        config: Config | None = None,
        console: ConsoleProtocol | None = None,
        verbose: bool = False,
    ) -> Result[Repository, GitError]:
        """Clone url into parent/directory.

        Args:
            url: Repository url or path
            parent: Existing directory to clone into
            directory: Target directory name, derived from url if None
        """
        try:
            name = directory or sync.humanish_name(url)
        except ValueError as e:
            return Err(GitError(command="clone", message=str(e)))

        caller = GitCaller(parent, (config or Config()).git, console=console, verbose=verbose)
        result = caller.execute(sync.clone(url, name))
        return result.map(
            lambda _: cls(parent / name, config=config, console=console, verbose=verbose)
        )

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        """Check if this is a non-bare git repository (.git dir or worktree file)."""
        return (self.path / ".git").exists()

    def is_inside_work_tree(self) -> bool:
        result = self.caller.execute(rev_parse.inside_work_tree())
        match result:
            case Ok(stdout):
                return stdout.strip() == "true"
            case Err(_):
                return False

    def status(self) -> Result[GitStatus, GitError]:
        """Get repository status.

        Runs `git status --porcelain=v1 -b` and parses the output.
        """
        return self.caller.execute(main.status()).map(parse_status)

    def is_clean(self) -> bool:
        """Check if working tree is clean. Returns False if status cannot be determined."""
        match self.status():
            case Ok(st):
                return st.is_clean
            case Err(_):
                return False

    def has_upstream(self) -> bool:
        """Check if current branch has an upstream configured."""
        return isinstance(self.caller.execute(rev_parse.upstream()), Ok)

    def current_branch(self) -> str | None:
        """Get current branch name. Returns None if detached HEAD or error."""
        match self.caller.execute(rev_parse.abbrev_ref("HEAD")):
            case Ok(stdout):
                name = stdout.strip()
                return None if name == "HEAD" else name
            case Err(_):
                return None

    def rev_parse(self, ref: str) -> Result[str, GitError]:
        """Resolve ref to a full commit sha."""
        result = self.caller.execute(rev_parse.verify(ref))
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command=e.command,
                        message=f"unknown revision '{ref}'",
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok(stdout.strip())

    # ------------------------------------------------------------------
    # Commits and history
    # ------------------------------------------------------------------

    def get_commit(self, ref: str = "HEAD") -> Result[Commit, GitError]:
        """Get a single commit by treeish."""
        result = self.caller.execute(show.show_commit(ref))
        match result:
            case Err(e):
                return Err(e)
            case Ok(stdout):
                commit = Commit.from_output(stdout)
                if commit is None:
                    return Err(GitError(command="show", message=f"'{ref}' is not a commit"))
                return Ok(commit)

    def commit_count(self, ref: str = "HEAD") -> Result[int, GitError]:
        """Number of commits reachable from ref, ref included."""
        result = self.caller.execute(rev_list.count(ref))
        match result:
            case Err(e):
                return Err(e)
            case Ok(stdout):
                try:
                    return Ok(int(stdout.strip()))
                except ValueError:
                    return Err(
                        GitError(command="rev-list", message=f"unexpected output: {stdout!r}")
                    )

    def branches_containing(self, ref: str) -> Result[list[str], GitError]:
        """Names of local branches whose history contains ref."""
        return self.caller.lines(branch.contains(ref), skip_empty=True).map(_branch_names)

    def _log_limit(self, limit: int | None) -> int | None:
        effective = self.config.log.limit if limit is None else limit
        return effective or None

    def get_log(
        self,
        ref: str = "HEAD",
        path: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Result[Log, GitError]:
        """History reachable from ref, newest first.

        Args:
            ref: Treeish to start from
            path: Only commits touching this path
            limit: Maximum commits; None uses the configured default, 0 means all
            offset: Commits to skip
        """
        command = log.log(ref, path=path, limit=self._log_limit(limit), offset=offset)
        return self.caller.execute(command).map(Log.from_output)

    def get_log_range(
        self,
        from_ref: str,
        to_ref: str,
        path: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Result[Log, GitError]:
        """Commits in to_ref that are not in from_ref."""
        command = log.log_range(
            from_ref, to_ref, path=path, limit=self._log_limit(limit), offset=offset
        )
        return self.caller.execute(command).map(Log.from_output)

    def get_object_log(
        self,
        path: str,
        ref: str = "HEAD",
        limit: int | None = None,
    ) -> Result[Log, GitError]:
        """History of a single file or directory."""
        return self.get_log(ref, path=path, limit=limit)

    # ------------------------------------------------------------------
    # Trees and content
    # ------------------------------------------------------------------

    def get_tree(
        self,
        ref: str = "HEAD",
        path: str = "",
        recursive: bool = False,
    ) -> Result[Tree, GitError]:
        """Contents of path at ref.

        A directory path yields its children; a file or submodule path yields
        a Tree whose blob is that node.
        """
        path = path.strip("/")
        if not path:
            command = ls_tree.tree(ref, recursive=recursive)
            return self.caller.execute(command).map(
                lambda out: Tree.from_output(ref, "", out, recursive=recursive)
            )

        result = self.caller.execute(ls_tree.tree(ref, path))
        if isinstance(result, Err):
            return result

        node = _find_node(result.value, path)
        if node is None:
            return Err(
                GitError(command="ls-tree", message=f"path '{path}' does not exist in '{ref}'")
            )
        if not node.is_tree:
            return Ok(Tree(ref=ref, path=path, blob=node))

        command = ls_tree.tree(ref, f"{path}/", recursive=recursive)
        return self.caller.execute(command).map(
            lambda out: Tree.from_output(ref, path, out, recursive=recursive)
        )

    def output_content(self, ref: str, path: str) -> Result[str, GitError]:
        """Text content of the blob at ref:path. Undecodable bytes are replaced."""
        return self.caller.execute(cat_file.content(ref, path))

    def object_type(self, ref: str, path: str | None = None) -> Result[str, GitError]:
        return self.caller.execute(cat_file.object_type(ref, path)).map(str.strip)

    def object_size(self, ref: str, path: str | None = None) -> Result[int, GitError]:
        return self.caller.execute(cat_file.size(ref, path)).map(lambda out: int(out.strip()))

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def branches(self, all: bool = False) -> Result[list[Branch], GitError]:
        """Branches with their tip commits.

        Args:
            all: Include remote-tracking branches
        """
        return self.caller.lines(branch.lists(all=all), skip_empty=True).map(
            lambda lines: [b for b in (Branch.from_output_line(ln) for ln in lines) if b]
        )

    def branch_names(self, all: bool = False) -> Result[list[str], GitError]:
        return self.caller.lines(branch.lists(all=all, simple=True), skip_empty=True).map(
            _branch_names
        )

    def get_branch(self, name: str) -> Result[Branch | None, GitError]:
        """A single local branch with upstream tracking info, Ok(None) if missing."""
        tracking = self.caller.lines(branch.tracking(name), skip_empty=True)
        if isinstance(tracking, Err):
            return tracking
        upstream = _configured_upstream(tracking.value, name)

        result = self.caller.lines(branch.single_info(name, verbose=True), skip_empty=True)
        match result:
            case Err(e):
                return Err(e)
            case Ok(lines):
                for line in lines:
                    found = Branch.from_output_line(line, verbose=True, upstream=upstream)
                    if found is not None and found.name == name:
                        return Ok(found)
                return Ok(None)

    def main_branch(self) -> Result[Branch, GitError]:
        """The checked-out branch (or the detached HEAD pseudo-branch)."""
        result = self.branches()
        match result:
            case Err(e):
                return Err(e)
            case Ok(found):
                for b in found:
                    if b.is_current:
                        return Ok(b)
                return Err(GitError(command="branch", message="no branch is checked out"))

    def create_branch(self, name: str, start_point: str | None = None) -> Result[None, GitError]:
        return self.caller.execute(branch.create(name, start_point)).map(lambda _: None)

    def delete_branch(self, name: str, force: bool = False) -> Result[None, GitError]:
        return self.caller.execute(branch.delete(name, force)).map(lambda _: None)

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def tags(self) -> Result[list[Tag], GitError]:
        """All tags with the commits they point to."""
        result = self.caller.execute(tag.show_refs())
        match result:
            case Err(e):
                # show-ref exits 1 without output when there are no tags
                if e.returncode == 1 and e.message == "git show-ref failed":
                    return Ok([])
                return Err(e)
            case Ok(stdout):
                return Ok(parse_show_ref(stdout))

    def get_tag(self, name: str) -> Result[Tag | None, GitError]:
        """A single tag, Ok(None) if missing."""
        result = self.caller.lines(tag.lists(), skip_empty=True)
        if isinstance(result, Err):
            return result
        if name not in (ln.strip() for ln in result.value):
            return Ok(None)

        sha = self.caller.execute(rev_list.last_commit(f"refs/tags/{name}"))
        return sha.map(lambda out: Tag(name=name, sha=out.strip()))

    def last_tag(self, ref: str = "HEAD") -> Result[Tag | None, GitError]:
        """Most recent tag reachable from ref, Ok(None) if there is none."""
        result = self.caller.execute(tag.last(ref))
        match result:
            case Err(e):
                if any(marker in e.message for marker in _NO_TAGS_MARKERS):
                    return Ok(None)
                return Err(e)
            case Ok(stdout):
                return self.get_tag(stdout.strip())

    def create_tag(
        self,
        name: str,
        start_point: str | None = None,
        message: str | None = None,
    ) -> Result[None, GitError]:
        return self.caller.execute(tag.create(name, start_point, message)).map(lambda _: None)

    def delete_tag(self, name: str) -> Result[None, GitError]:
        return self.caller.execute(tag.delete(name)).map(lambda _: None)

    # ------------------------------------------------------------------
    # Working tree
    # ------------------------------------------------------------------

    def stage(self, path: str | None = None) -> Result[None, GitError]:
        """Stage changes under path, or everything."""
        return self.caller.execute(main.add(path)).map(lambda _: None)

    def unstage(self, path: str) -> Result[None, GitError]:
        return self.caller.execute(main.unstage(path)).map(lambda _: None)

    def move(self, source: str, destination: str) -> Result[None, GitError]:
        return self.caller.execute(main.move(source, destination)).map(lambda _: None)

    def remove(
        self,
        path: str,
        recursive: bool = False,
        cached: bool = False,
    ) -> Result[None, GitError]:
        return self.caller.execute(main.remove(path, recursive, cached)).map(lambda _: None)

    def commit(
        self,
        message: str,
        stage_all: bool = False,
        allow_empty: bool = False,
        author: str | None = None,
    ) -> Result[Commit, GitError]:
        """Record a commit and return it."""
        result = self.caller.execute(main.commit(message, stage_all, allow_empty, author))
        return result.flat_map(lambda _: self.get_commit("HEAD"))

    def checkout(self, ref: str, create: bool = False) -> Result[None, GitError]:
        return self.caller.execute(main.checkout(ref, create)).map(lambda _: None)

    def merge(
        self,
        branch_name: str,
        message: str | None = None,
        no_ff: bool = True,
    ) -> Result[str, GitError]:
        return self.caller.execute(main.merge(branch_name, message, no_ff)).map(str.strip)

    # ------------------------------------------------------------------
    # Diff
    # ------------------------------------------------------------------

    def diff(
        self,
        from_ref: str = "HEAD",
        to_ref: str | None = None,
        path: str | None = None,
    ) -> Result[Diff, GitError]:
        """Changes between two treeishes, or from from_ref to the working tree."""
        return self.caller.execute(diff.diff(from_ref, to_ref, path)).flat_map(_parse_patch)

    # ------------------------------------------------------------------
    # Remotes
    # ------------------------------------------------------------------

    def remotes(self) -> Result[list[Remote], GitError]:
        return self.caller.execute(remote.lists()).map(parse_remotes)

    def get_remote(self, name: str) -> Result[Remote | None, GitError]:
        return self.remotes().map(lambda found: next((r for r in found if r.name == name), None))

    def add_remote(self, name: str, url: str) -> Result[None, GitError]:
        return self.caller.execute(remote.add(name, url)).map(lambda _: None)

    def remove_remote(self, name: str) -> Result[None, GitError]:
        return self.caller.execute(remote.remove(name)).map(lambda _: None)

    def fetch(
        self,
        remote_name: str | None = None,
        branch_name: str | None = None,
        tags: bool = False,
    ) -> Result[str, GitError]:
        return self.caller.execute(sync.fetch(remote_name, branch_name, tags)).map(str.strip)

    def pull(
        self,
        remote_name: str | None = None,
        branch_name: str | None = None,
        rebase: bool = False,
    ) -> Result[str, GitError]:
        return self.caller.execute(sync.pull(remote_name, branch_name, rebase)).map(str.strip)

    def pull_ff(self) -> Result[str, GitError]:
        """Pull with fast-forward only."""
        return self.caller.execute(sync.pull(ff_only=True)).map(str.strip)

    def push(
        self,
        remote_name: str | None = None,
        branch_name: str | None = None,
        set_upstream: bool = False,
        tags: bool = False,
    ) -> Result[str, GitError]:
        command = sync.push(remote_name, branch_name, set_upstream, tags)
        return self.caller.execute(command).map(str.strip)


def _branch_names(lines: list[str]) -> list[str]:
    return [name for name in (parse_branch_name(ln) for ln in lines) if name]


def _configured_upstream(lines: list[str], name: str) -> str | None:
    for line in lines:
        ref, _, upstream = line.partition(" ")
        if ref == name:
            return upstream.strip() or None
    return None


def _find_node(output: str, path: str) -> TreeObject | None:
    for line in output_lines(output, skip_empty=True):
        node = TreeObject.from_output_line(line)
        if node is not None and node.full_path == path:
            return node
    return None


def _parse_patch(output: str) -> Result[Diff, GitError]:
    try:
        return Ok(parse_diff(output))
    except ValueError as e:
        return Err(GitError(command="diff", message=str(e), returncode=-1))
