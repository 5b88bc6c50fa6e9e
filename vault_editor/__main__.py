"""Allow ``python -m vault_editor``."""

from vault_editor.server import main

main()
