# Copyright 2026 pumlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""pumlgen: PlantUML class diagrams from C# source files."""
