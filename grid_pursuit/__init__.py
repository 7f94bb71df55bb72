"""Local pursuit of a target across a bounded obstacle grid."""
