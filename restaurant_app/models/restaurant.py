"""
Restaurant and Menu Item Models
"""

from restaurant_app.extensions import db


class Restaurant(db.Model):
    """A restaurant listed in the directory"""
    __tablename__ = 'restaurants'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    cuisine = db.Column(db.String(80), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(40), nullable=False)
    opening_hours = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    image_url = db.Column(db.String(500))

    # Deleting a restaurant removes its menu and reviews
    menu_items = db.relationship('MenuItem', backref='restaurant', lazy=True,
                                 cascade='all, delete')
    reviews = db.relationship('Review', backref='restaurant', lazy=True,
                              cascade='all, delete')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'cuisine': self.cuisine,
            'location': self.location,
            'phone': self.phone,
            'openingHours': self.opening_hours,
            'description': self.description,
            'imageUrl': self.image_url,
        }

    def __repr__(self):
        return f'<Restaurant {self.name}>'


class MenuItem(db.Model):
    """A dish or drink on a restaurant's menu"""
    __tablename__ = 'menu_items'

    id = db.Column(db.Integer, primary_key=True)
    restaurant_id = db.Column(db.Integer, db.ForeignKey('restaurants.id', ondelete='CASCADE'),
                              nullable=False, index=True)
    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.String(20), nullable=False)
    category = db.Column(db.String(80), nullable=False)
    image_url = db.Column(db.String(500))

    def to_dict(self):
        return {
            'id': self.id,
            'restaurantId': self.restaurant_id,
            'name': self.name,
            'description': self.description,
            'price': self.price,
            'category': self.category,
            'imageUrl': self.image_url,
        }

    def __repr__(self):
        return f'<MenuItem {self.name} Restaurant:{self.restaurant_id}>'
