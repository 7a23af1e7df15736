"""
Review Model
"""

from datetime import datetime, timezone
from restaurant_app.extensions import db


def utcnow():
    """Current UTC time as a naive datetime, the form the column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Review(db.Model):
    """A user's rating and comment for a restaurant"""
    __tablename__ = 'reviews'
    __table_args__ = (
        db.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_review_rating_range'),
    )

    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, db.ForeignKey('restaurants.id', ondelete='CASCADE'),
                              nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'),
                        nullable=False, index=True)
    rating = db.Column(db.Integer, nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'restaurantId': self.restaurant_id,
            'userId': self.user_id,
            'rating': self.rating,
            'content': self.content,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Review Restaurant:{self.restaurant_id} User:{self.user_id} Rating:{self.rating}>'
