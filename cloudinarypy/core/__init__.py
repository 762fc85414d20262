"""Core building blocks of the Cloudinary client."""
