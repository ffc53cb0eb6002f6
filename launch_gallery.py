"""Launch the artworks gallery against the Art Institute of Chicago API."""

import artworks_gallery as ag

config = ag.GalleryConfig.from_env()
ag.configure_logging(config.log_level)

print(f"Collection endpoint: {config.api_url}")
print(f"Page size: {config.page_size}")
print("Launching dashboard...")

ag.explore(config)
