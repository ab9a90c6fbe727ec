"""Settings command: config."""

from dataclasses import asdict

from ...io.serializers import to_json
from .. import views
from ..app import JsonOption, app, get_config


@app.command()
def config(json_out: JsonOption = False) -> None:
    """Show the effective defaults and the file they were loaded from."""
    cfg = get_config()

    if json_out:
        data = asdict(cfg)
        data["distribution"] = cfg.distribution.value
        print(to_json(data))
        return

    views.print_config(cfg)
