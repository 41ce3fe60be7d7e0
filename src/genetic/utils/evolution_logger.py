"""
Evolution logger for tracking the progress of a run.

Each evaluated generation is logged through the logging module. When an
output directory is given, the accumulated statistics are also written to
history.json. Genome material is never written, so a run cannot be resumed
from these files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.genome import Genome
from ..optimization.config import GenerationHistory


logger = logging.getLogger(__name__)


class EvolutionLogger:
    """
    Records per-generation statistics of an evolution run.
    """

    def __init__(self, output_dir: Optional[Path] = None):
        """
        Initialize the evolution logger.

        Args:
            output_dir: Directory for history.json (log-only if None)
        """
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.records: List[Dict[str, Any]] = []

        if self.output_dir is not None:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"EvolutionLogger writing to {self.output_dir}")

    def log_generation(self, record: GenerationHistory) -> None:
        """
        Log statistics of one evaluated generation.

        Args:
            record: Generation statistics
        """
        self.records.append(record.to_dict())

        logger.info(
            f"Epoch {record.epoch}: best={record.best_fitness:.4f} "
            f"avg={record.avg_fitness:.4f} worst={record.worst_fitness:.4f} "
            f"total={record.total_fitness:.4f}"
        )

        if self.output_dir is not None:
            self._save_json("history.json", {"generations": self.records})

    def log_final_best(self, best: Genome, epoch: int) -> None:
        """
        Log the best genome of the run.

        Args:
            best: Best genome found
            epoch: Epoch at which the run stopped
        """
        logger.info(f"Finished at epoch {epoch}. Best: {best!r} (fitness {best.get_fitness()})")

        if self.output_dir is not None:
            self._save_json(
                "history.json",
                {
                    "generations": self.records,
                    "final_epoch": epoch,
                    "best_fitness": best.get_fitness(),
                },
            )

    def _save_json(self, filename: str, data: Dict[str, Any]) -> None:
        filepath = self.output_dir / filename
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
