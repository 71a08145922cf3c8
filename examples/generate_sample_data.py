import sys

from frametour.datasets import SampleData

directory = sys.argv[1] if len(sys.argv) > 1 else "data"
seed = int(sys.argv[2]) if len(sys.argv) > 2 else 42

for name, path in SampleData(seed=seed, rows=1000).write_csv_samples(directory).items():
    print(f"{name}: {path}")
