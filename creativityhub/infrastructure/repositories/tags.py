"""
Tag repository, including the idea <-> tag link table.

The link table has no key, so the same pair can appear twice; readers
de-duplicate and unlinking removes every copy.
"""
import logging
import uuid
from typing import List

from sqlalchemy import delete, select

from creativityhub.domain.idea import IdeaTagLink, Tag
from creativityhub.infrastructure.db.models import TagModel, idea_tags
from creativityhub.infrastructure.repositories.base import STORAGE_ERRORS, BaseRepository

logger = logging.getLogger(__name__)


class TagRepository(BaseRepository[Tag]):
    model = TagModel
    entity_cls = Tag
    label = "tag"
    search_columns = ("name",)

    def order_by(self) -> list:
        return [TagModel.name.asc(), TagModel.id.asc()]

    def delete(self, entity_id: uuid.UUID) -> bool:
        links_ok = self._write(
            delete(idea_tags).where(idea_tags.c.tag_id == entity_id),
            f"delete links of tag {entity_id}",
        ) is not None
        return super().delete(entity_id) and links_ok

    # ------------------------------------------------------------------
    # Idea links
    # ------------------------------------------------------------------

    def fetch_tags_for_idea(self, idea_id: uuid.UUID) -> List[Tag]:
        linked = select(idea_tags.c.tag_id).where(idea_tags.c.idea_id == idea_id)
        stmt = select(TagModel).where(TagModel.id.in_(linked)).order_by(*self.order_by())
        return self._fetch_list(stmt, f"tags for idea {idea_id}")

    def _fetch_links(self, stmt, what: str) -> List[IdeaTagLink]:
        seen = []
        try:
            for row in self.db.execute(stmt).all():
                link = IdeaTagLink(idea_id=row.idea_id, tag_id=row.tag_id)
                if link not in seen:
                    seen.append(link)
        except STORAGE_ERRORS:
            self.db.rollback()
            logger.exception("Failed to fetch %s", what)
            return []
        return seen

    def fetch_links_for_idea(self, idea_id: uuid.UUID) -> List[IdeaTagLink]:
        stmt = select(idea_tags.c.idea_id, idea_tags.c.tag_id).where(idea_tags.c.idea_id == idea_id)
        return self._fetch_links(stmt, f"tag links for idea {idea_id}")

    def fetch_all_links(self) -> List[IdeaTagLink]:
        stmt = select(idea_tags.c.idea_id, idea_tags.c.tag_id)
        return self._fetch_links(stmt, "all tag links")

    def link_tag_to_idea(self, tag_id: uuid.UUID, idea_id: uuid.UUID) -> bool:
        stmt = idea_tags.insert().values(idea_id=idea_id, tag_id=tag_id)
        if self._write(stmt, f"link tag {tag_id} to idea {idea_id}") is None:
            return False
        logger.info("Linked tag %s to idea %s", tag_id, idea_id)
        return True

    def unlink_tag_from_idea(self, tag_id: uuid.UUID, idea_id: uuid.UUID) -> bool:
        stmt = delete(idea_tags).where(
            idea_tags.c.idea_id == idea_id,
            idea_tags.c.tag_id == tag_id,
        )
        return self._write(stmt, f"unlink tag {tag_id} from idea {idea_id}") is not None

    def delete_links_for_idea(self, idea_id: uuid.UUID) -> bool:
        stmt = delete(idea_tags).where(idea_tags.c.idea_id == idea_id)
        return self._write(stmt, f"delete tag links for idea {idea_id}") is not None

    def delete_all_links(self) -> bool:
        return self._write(delete(idea_tags), "delete all tag links") is not None
