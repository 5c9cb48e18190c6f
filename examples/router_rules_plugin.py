#!/usr/bin/env python3
"""Example rule plugin rewriting react-router imports and links for @solidjs/router."""

from __future__ import annotations

import re
from collections.abc import Sequence

from solid_migrator.rewrites.rules import RewritePass, RewriteRule, rule_pass

ROUTER_IMPORT = RewriteRule(
    name="router-import",
    pattern=re.compile(r"""from\s+(['"])react-router-dom\1"""),
    replacement=r"from \1@solidjs/router\1",
)

# useNavigate keeps its name; Link and NavLink become A.
LINK_ELEMENT = RewriteRule(
    name="router-link",
    pattern=re.compile(r"<(/?)(?:Nav)?Link\b"),
    replacement=r"<\1A",
)

LINK_TARGET = RewriteRule(
    name="router-link-target",
    pattern=re.compile(r"<A(\s[^>]*?)\bto="),
    replacement=r"<A\1href=",
)


class RouterRulesPlugin:
    """Translate the common react-router surface to @solidjs/router."""

    name = "react-router"

    def passes(self) -> Sequence[RewritePass]:
        """Return the router passes.

        Returns
        -------
        Sequence[RewritePass]
            Import rewrite first, then element and attribute renames.
        """
        return (
            rule_pass(
                "router-imports",
                ROUTER_IMPORT,
                description="react-router-dom -> @solidjs/router",
            ),
            rule_pass(
                "router-links",
                LINK_ELEMENT,
                LINK_TARGET,
                description="<Link to=...> -> <A href=...>",
            ),
        )


PLUGIN = RouterRulesPlugin()
