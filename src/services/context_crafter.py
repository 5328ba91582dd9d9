"""
ContextCrafter entry point.

Brings together:
- Configuration loading (env vars > YAML > defaults)
- Logging setup from the logging section
- Graph, content and manual collectors over one document store
"""

from collections.abc import Iterable
from pathlib import Path

from src.config import Config
from src.core.document_store import DocumentStore
from src.core.scoring import RelevanceScorer
from src.models.collection import CollectionResult
from src.models.document import DocumentRef
from src.services.content_collector import ContentCollector
from src.services.graph_collector import GraphCollector
from src.services.manual_collector import ManualCollector
from src.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def configure_logging(config: Config) -> None:
    """Install log sinks as described by the config's logging section."""
    setup_logging(
        level=config.logging.level,
        log_to_file=config.logging.log_to_file,
        log_dir=config.logging.log_dir,
        file_rotation=config.logging.file_rotation,
        file_retention=config.logging.file_retention,
        compression=config.logging.compression,
        serialize=config.logging.serialize,
    )


class ContextCrafter:
    """
    Collects context bundles around focal documents of one store.

    Usage:
        crafter = ContextCrafter.from_env(store, yaml_path="crafter.yaml")
        bundle = await crafter.collect_links("projects/plan.md")
        related = await crafter.collect_content("projects/plan.md")
    """

    def __init__(
        self,
        document_store: DocumentStore,
        config: Config | None = None,
        scorer: RelevanceScorer | None = None,
    ):
        """
        Initialize ContextCrafter.

        Does not touch logging; use from_env() or configure_logging() for that.

        Args:
            document_store: Store to collect from
            config: Configuration (defaults used if omitted)
            scorer: Relevance scorer for content collection
        """
        self.document_store = document_store
        self.config = config or Config()

        self.graph_collector = GraphCollector(document_store, self.config.collection)
        self.content_collector = ContentCollector(
            document_store,
            config=self.config.collection,
            match_config=self.config.content_match,
            scorer=scorer,
        )
        self.manual_collector = ManualCollector(document_store, self.config.collection)

    @classmethod
    def from_env(
        cls,
        document_store: DocumentStore,
        yaml_path: str | Path | None = None,
        env_file: str | Path | None = None,
    ) -> "ContextCrafter":
        """
        Load configuration, set up logging and build a ContextCrafter.

        Args:
            document_store: Store to collect from
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Configured ContextCrafter

        Raises:
            ConfigurationError: If an environment variable is malformed
        """
        config = Config.from_env_or_yaml(yaml_path=yaml_path, env_file=env_file)
        configure_logging(config)

        logger.info(
            f"ContextCrafter ready: depth={config.collection.max_depth}, "
            f"threshold={config.content_match.similarity_threshold}, "
            f"max_results={config.content_match.max_results}"
        )
        return cls(document_store, config)

    async def collect_links(self, focal: DocumentRef | str | None) -> CollectionResult:
        """Link-graph bundle around the focal document."""
        return await self.graph_collector.collect(focal)

    async def collect_content(self, focal: DocumentRef | str | None) -> CollectionResult:
        """Relevance-ranked bundle around the focal document."""
        return await self.content_collector.collect(focal)

    async def collect_manual(self, selected: Iterable[DocumentRef | str]) -> CollectionResult:
        """Bundle of explicitly selected documents."""
        return await self.manual_collector.collect(selected)

    async def close(self) -> None:
        await self.document_store.close()
