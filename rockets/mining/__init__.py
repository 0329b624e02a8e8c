from rockets.mining.errors import InvalidArgumentError, MiningError, NullArgumentError
from rockets.mining.miner import RocketMiner, top_k_by_occurrence

__all__ = [
    "InvalidArgumentError",
    "MiningError",
    "NullArgumentError",
    "RocketMiner",
    "top_k_by_occurrence",
]
