from app import create_app
from extensions import db
from models import User
from werkzeug.security import generate_password_hash


def create_user(app, username, password, role):
    """Create a user unless the username is taken. Returns the user or None."""
    with app.app_context():
        existing_user = User.query.filter_by(username=username).first()
        if existing_user:
            print(f"User '{username}' already exists with role '{existing_user.role}'.")
            return None

        user = User(
            username=username,
            password=generate_password_hash(password),
            role=role
        )
        db.session.add(user)
        db.session.commit()
        print(f"Created user: {username} (role: {role})")
        return user

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Create a new blog user.')
    parser.add_argument('username', help='Username')
    parser.add_argument('password', help='Password')
    parser.add_argument('role', help='User role, "admin" may write and delete posts')

    args = parser.parse_args()
    create_user(create_app(), args.username, args.password, args.role)
