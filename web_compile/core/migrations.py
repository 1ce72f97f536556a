"""
Migrations — project fix-ups applied before every web build.

``lib/generated_plugin_registrant.dart`` used to be written into the
project; it is now generated into the build directory, so a stale copy
is deleted along with its ``.gitignore`` entry.
"""
import logging

from web_compile.core.project import WebProject

logger = logging.getLogger(__name__)

REGISTRANT = "generated_plugin_registrant.dart"


def scrub_generated_plugin_registrant(project: WebProject) -> bool:
    """
    Remove a stale generated plugin registrant from ``lib/``.

    Returns True if the project was changed.
    """
    registrant = project.lib_dir / REGISTRANT
    if not registrant.is_file():
        logger.debug(f"{REGISTRANT} not found. Skipping.")
        return False

    registrant.unlink()
    logger.info(f"Removed stale {registrant.relative_to(project.directory)}")

    gitignore = project.directory / ".gitignore"
    if gitignore.is_file():
        lines = gitignore.read_text().splitlines(keepends=True)
        kept = [line for line in lines if line.strip() not in (f"lib/{REGISTRANT}", f"/lib/{REGISTRANT}")]
        if len(kept) != len(lines):
            gitignore.write_text("".join(kept))
            logger.info(f"Removed lib/{REGISTRANT} from .gitignore")

    return True
