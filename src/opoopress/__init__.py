"""OpooPress - site initialization and content scaffolding.

    from opoopress import Site, initialize, create_new_file

    initialize(Path("my-site"), locale="zh_CN")
    path = create_new_file(Site.load(Path("my-site")), "post", title="Hello World")
"""

from opoopress.exceptions import OpooPressError
from opoopress.init import initialize
from opoopress.scaffold import create_new_file
from opoopress.site import Site

__all__ = ["OpooPressError", "Site", "create_new_file", "initialize"]
