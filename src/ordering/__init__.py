"""Ordering bounded context: checkout and the order log."""
