"""Run ProGuard as a build-pipeline step."""
