"""Resize images uploaded to S3 and move them to the "-resized" bucket."""
