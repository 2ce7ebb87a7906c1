import sys

from packshot_compositor.api_stub.runner import run_from_env

if len(sys.argv) != 3:
    sys.exit("usage: python scratch_test.py <product-image> <overlay-image>")

res = run_from_env(
    sys.argv[1],
    sys.argv[2],
    {
        "backgroundColor": [0, 0, 255, 255],
        "resizeMode": {"type": "Scale", "value": 1},
        "offsetMode": {"type": "Percent", "value": [50, 50]},
    },
)
print(res.model_dump(exclude={"data"}))
