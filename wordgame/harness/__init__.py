from .core import run_round, run_batch, summarize, pretty_summary
from .players import BasePlayer, create_player, get_player_ids

__all__ = ["run_round", "run_batch", "summarize", "pretty_summary",
           "BasePlayer", "create_player", "get_player_ids"]
