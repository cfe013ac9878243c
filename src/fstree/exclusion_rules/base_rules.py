from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """Interface of an ignore-rule set consulted by the entry filter.

    A rule set answers one question: is this root-relative path hidden? How the rules
    are loaded is up to each subclass.

    Example:
        >>> from fstree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("dist/")
        >>> rules.matched("dist", is_dir=True), rules.matched("dist", is_dir=False)
        (True, False)
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """Return True if ``path`` is hidden by the rules.

        Args:
            path: Root-relative path with forward slashes. A trailing slash marks a
                directory.
        """
        pass

    def matched(self, relative_path: str, is_dir: bool) -> bool:
        """Like exclude(), for a path whose type is already known.

        Directory paths get a trailing slash so that rules such as ``build/``
        only ever hide directories.
        """
        if is_dir and not relative_path.endswith("/"):
            relative_path += "/"
        return self.exclude(relative_path)
