"""Review service: creation rules and the approval workflow.

A review starts unapproved with zero approvals. Each ``approve`` call by a
user other than the author adds one approval; once the count reaches the
configured minimum the review is approved. There is no way back to
unapproved, and voters are not de-duplicated.
"""

from core import get_logger
from core.config import ApprovalConfiguration
from core.exceptions import NotFoundError, ValidationError
from models import Review
from repositories.ports import PosDataService, ReviewDataService, UserDataService
from services.crud_service import CrudService

logger = get_logger(__name__)


class ReviewService(CrudService[Review, int]):
    def __init__(
        self,
        review_data_service: ReviewDataService,
        user_data_service: UserDataService,
        pos_data_service: PosDataService,
        approval_configuration: ApprovalConfiguration,
    ):
        super().__init__(Review)
        self._review_data_service = review_data_service
        self._user_data_service = user_data_service
        self._pos_data_service = pos_data_service
        self.approval_configuration = approval_configuration

    @property
    def data_service(self) -> ReviewDataService:
        return self._review_data_service

    def upsert(self, review: Review) -> Review:
        """Create or update a review.

        Raises:
            NotFoundError: If the reviewed POS does not exist, or an update
                targets a review that does not exist.
            ValidationError: If the author already reviewed this POS.
        """
        pos = self._pos_data_service.get_by_id(review.pos.id)

        existing = self._review_data_service.filter_by_author(pos, review.author)
        # An update of the author's own review is not a duplicate of itself
        duplicates = [r for r in existing if review.id is None or r.id != review.id]
        if duplicates:
            logger.warning(
                "review.duplicate_rejected",
                pos_id=pos.id,
                author_id=review.author.id,
            )
            raise ValidationError(
                f"User {review.author.login_name!r} already reviewed "
                f"POS {pos.name!r}."
            )

        return super().upsert(review)

    def approve(self, review: Review, user_id: int) -> Review:
        """Cast one approval vote for a review.

        The count is incremented on the stored review, not on the passed
        copy, so callers holding stale data cannot roll it back.

        Raises:
            NotFoundError: If the user or the review does not exist.
            ValidationError: If the user is the review's author.
        """
        user = self._user_data_service.get_by_id(user_id)

        if review.id is None:
            raise NotFoundError(Review, None)
        current = self.get_by_id(review.id)

        if user.id == current.author.id:
            logger.warning(
                "review.self_approval_rejected", review_id=current.id, user_id=user.id
            )
            raise ValidationError("Users cannot approve their own reviews.")

        approved = self.update_approval_status(
            current.model_copy(update={"approval_count": current.approval_count + 1})
        )
        persisted = self._review_data_service.upsert(approved)

        logger.info(
            "review.approved",
            review_id=persisted.id,
            user_id=user.id,
            approval_count=persisted.approval_count,
            approved=persisted.approved,
        )
        return persisted

    def update_approval_status(self, review: Review) -> Review:
        """Return a copy whose approved flag matches the approval threshold."""
        is_approved = review.approval_count >= self.approval_configuration.min_count
        return review.model_copy(update={"approved": is_approved})

    def filter(self, pos_id: int, approved: bool) -> list[Review]:
        """List a POS's reviews with the given approval flag.

        Raises:
            NotFoundError: If the POS does not exist.
        """
        pos = self._pos_data_service.get_by_id(pos_id)
        return self._review_data_service.filter_by_approval(pos, approved)
