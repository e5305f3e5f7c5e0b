# Trust Layer Services
#
# Everything VeriSynth computes locally between remote extraction and the
# final result:
# - Where each claim sits in the text (ClaimAligner)
# - What the grounded verification answer means (status_classifier.classify)
# - The verified replacement of each claim (ClaimVerifier)
# - How far the text as a whole can be trusted (TrustScorer)
