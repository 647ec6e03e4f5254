def levenshteinDistance(str1: str, str2: str) -> int:
	""" Minimum number of single character insertions, deletions or
	substitutions needed to turn str1 into str2
	"""
	# rows follow str2, columns follow str1
	matrix = [[i] for i in range(len(str2) + 1)]
	matrix[0] = list(range(len(str1) + 1))

	for i in range(1, len(str2) + 1):
		for j in range(1, len(str1) + 1):
			if str2[i - 1] == str1[j - 1]:
				matrix[i].append(matrix[i - 1][j - 1])
			else:
				matrix[i].append(min(
					matrix[i - 1][j - 1] + 1,
					matrix[i][j - 1] + 1,
					matrix[i - 1][j] + 1
				))

	return matrix[len(str2)][len(str1)]


def similarityRatio(str1: str, str2: str) -> float:
	if len(str1) >= len(str2):
		longer, shorter = str1, str2
	else:
		longer, shorter = str2, str1

	if len(longer) == 0:
		return 1.0

	return (len(longer) - levenshteinDistance(longer, shorter)) / len(longer)


def fuzzyMatch(str1: str, str2: str, threshold: float = 0.8) -> bool:
	return similarityRatio(str1, str2) >= threshold
