from .summarize import RunConfig, run_summary

__all__ = ["RunConfig", "run_summary"]
