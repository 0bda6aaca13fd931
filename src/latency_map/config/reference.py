# latency_map/config/reference.py
# Reference network: five Latin American exchange points, latencies in ms.
# Directed; both directions are listed even when symmetric.

REFERENCE_NODES: list[dict] = [
    {"name": "Ciudad de México", "coordinates": (-99.1332, 19.4326)},
    {"name": "Lima", "coordinates": (-77.0428, -12.0464)},
    {"name": "Montevideo", "coordinates": (-56.1645, -34.9011)},
    {"name": "Santiago de Chile", "coordinates": (-70.6693, -33.4489)},
    {"name": "Buenos Aires", "coordinates": (-58.3816, -34.6037)},  # EZE
]

REFERENCE_EDGES: dict[str, dict[str, int]] = {
    "Ciudad de México": {
        "Lima": 136,
        "Santiago de Chile": 161,
        "Buenos Aires": 179,
    },
    "Lima": {
        "Ciudad de México": 137,
        "Montevideo": 61,
        "Santiago de Chile": 31,
        "Buenos Aires": 77,
    },
    "Montevideo": {
        "Lima": 61,
        "Santiago de Chile": 30,
        "Buenos Aires": 10,
    },
    "Santiago de Chile": {
        "Ciudad de México": 160,
        "Lima": 32,
        "Montevideo": 30,
        "Buenos Aires": 22,
    },
    "Buenos Aires": {
        "Ciudad de México": 194,
        "Lima": 78,
        "Santiago de Chile": 22,
        "Montevideo": 10,
    },
}
