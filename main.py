# main.py
import json
import sys

from latency_map.app.build import build
from latency_map.io.config import load_config


def run(
    source: str = "Lima", destination: str = "Buenos Aires", config_path: str | None = None
) -> dict:
    cfg = load_config(config_path) if config_path else None
    app = build(cfg)

    # Two picks form the direct connection, then ask for the optimized route
    app.pick(source)
    app.pick(destination)
    app.optimize()

    return app.view()["summary"] | {"route": app.state.route and list(app.state.route.nodes)}


if __name__ == "__main__":
    # python main.py "Lima" "Buenos Aires" [config.json]
    print(json.dumps(run(*sys.argv[1:4]), ensure_ascii=False))
