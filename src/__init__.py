"""Storefront Admin Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Serverless storefront back office using AWS Lambda, MongoDB, and S3"
)

__all__ = ["handlers", "core"]
