"""site_qa.crawler: HTTP fetching, link extraction and reachability checks."""
