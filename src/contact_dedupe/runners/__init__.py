from contact_dedupe.runners.local import LocalMatchPipeline
from contact_dedupe.runners.parallel import ParallelMatchPipeline, partition_rows

__all__ = ["LocalMatchPipeline", "ParallelMatchPipeline", "partition_rows"]
