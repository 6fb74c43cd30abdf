"""Stack modules — configuration, cluster, workloads, guestbook, wiring."""
