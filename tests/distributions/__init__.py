# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0
