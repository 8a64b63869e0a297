"""HTTP routes of the Monopoly service.

`router` bundles every route module (today only `players`) and is what
`main.create_app` mounts.
"""

from .api_router import router
